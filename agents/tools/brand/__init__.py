"""
Website brand analysis: fetching, color/font/logo/content extraction.
"""

from agents.tools.brand.page_fetcher import PageFetcher, FetchedPage, fetch_page
from agents.tools.brand.color_extractor import extract_colors
from agents.tools.brand.font_extractor import extract_fonts
from agents.tools.brand.logo_extractor import extract_logos
from agents.tools.brand.content_extractor import extract_content, generate_content_summary
from agents.tools.brand.website_analyzer import analyze_website

__all__ = [
    'PageFetcher',
    'FetchedPage',
    'fetch_page',
    'extract_colors',
    'extract_fonts',
    'extract_logos',
    'extract_content',
    'generate_content_summary',
    'analyze_website',
]
