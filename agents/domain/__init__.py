"""
Domain models and value objects.
"""

from agents.domain.models import (
    RGB,
    CMYK,
    HSL,
    ColorUsage,
    FontUsage,
    FontCategory,
    LogoVariant,
    ColorCandidate,
    ColorData,
    FontCandidate,
    FontData,
    LogoCandidate,
    LogoData,
    ContactInfo,
    ExtractedContent,
    AnalysisResult,
    AnalysisProgress,
    GenerationProgress
)

__all__ = [
    'RGB',
    'CMYK',
    'HSL',
    'ColorUsage',
    'FontUsage',
    'FontCategory',
    'LogoVariant',
    'ColorCandidate',
    'ColorData',
    'FontCandidate',
    'FontData',
    'LogoCandidate',
    'LogoData',
    'ContactInfo',
    'ExtractedContent',
    'AnalysisResult',
    'AnalysisProgress',
    'GenerationProgress'
]
