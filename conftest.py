"""
Shared fixtures: a sample analysis and canned LLM section replies.
"""

from datetime import datetime, timezone

import pytest

from agents.domain.models import (
    RGB,
    CMYK,
    AnalysisResult,
    ColorData,
    ColorUsage,
    ExtractedContent,
    FontCategory,
    FontData,
    FontUsage,
    LogoData,
    LogoVariant,
)
import agents.generation.brand_guidelines_generator as generator_module

_LEVEL = {"size": "16px", "weight": "400", "lineHeight": "1.5", "usage": "Body copy"}

SECTION_REPLIES = {
    "PositioningResponse": {
        "positioning": {
            "statement": "For launch teams who need orbit on schedule, Acme is the rocket partner that delivers.",
            "targetAudience": "Satellite operators",
            "marketCategory": "Launch services",
            "competitiveAdvantage": "Weekly launch windows",
            "reasonToBelieve": "Thirty years of flights",
        },
        "mission": {"statement": "Make orbit routine.", "explanation": "Access to space for everyone."},
        "vision": {"statement": "A launch every day.", "timeframe": "2035"},
        "brandPromise": {"promise": "On time, every time.", "delivery": "Reusable boosters"},
        "boilerplate": "Acme builds reliable rockets.",
    },
    "PersonalityResponse": {
        "personalityTraits": [
            {"trait": "Dependable", "description": "We show up.", "behaviors": ["Publish schedules"]},
        ],
        "brandArchetype": {"primary": "The Hero", "secondary": "The Sage", "description": "Brave and wise"},
    },
    "MessagingResponse": {
        "brandPillars": [{"name": "Reliability", "description": "Flights that fly.", "proofPoints": ["99% success"]}],
        "valuePropositions": [{"headline": "Orbit on schedule", "subheadline": "Weekly", "audience": "Operators"}],
        "keyMessages": [{"message": "We launch weekly.", "context": "Sales", "audience": "Operators"}],
        "elevator": {
            "15second": "Acme gets you to orbit.",
            "30second": "Acme gets you to orbit on your schedule.",
            "60second": "Acme gets you to orbit on your schedule with reusable boosters.",
        },
        "extraKeyFromTheModel": "ignored",
    },
    "VoiceToneResponse": {
        "voiceAttributes": [
            {"attribute": "Confident", "description": "Sure of ourselves.",
             "doExample": "We launch weekly.", "dontExample": "We might launch."},
        ],
        "toneSpectrum": [{"dimension": "Formal vs Casual", "position": 40, "description": "Slightly formal"}],
        "writingStyle": {"sentenceLength": "Short", "vocabulary": "Plain", "punctuation": "Minimal", "formatting": "Lists"},
        "styleRules": [{"category": "Numbers", "rule": "Use numerals", "example": "3 launches"}],
    },
    "TypographyResponse": {
        "primaryTypeface": {"name": "Inter", "usage": "Headings", "weights": ["400", "700"], "characteristics": "Clean"},
        "secondaryTypeface": {"name": "Lora", "usage": "Body", "weights": ["400"], "characteristics": "Warm"},
        "hierarchy": {level: dict(_LEVEL) for level in ("h1", "h2", "h3", "h4", "body", "small")},
        "guidelines": ["Left align text"],
    },
    "LogoGuidelinesResponse": {
        "logoVersions": [{"name": "Primary", "usage": "Default", "background": "Light"}],
        "clearSpace": {"rule": "Height of the A", "minimumSize": "24px"},
        "donts": ["Do not stretch"],
        "placement": {"preferred": ["Top left"], "cobranding": "Separate with a rule"},
    },
    "ColorGuidelinesResponse": {
        "colorPrinciples": ["Lead with navy"],
        "primaryUsage": {"#123456": ["Headers", "Buttons"]},
        "combinations": [{"name": "Classic", "background": "#FFFFFF", "text": "#123456", "accent": "#CC3300"}],
        "accessibility": {"minimumContrast": "4.5:1", "guidelines": ["Check contrast"]},
    },
    "AppositivesResponse": {
        "appositives": [{"phrase": "the launch partner", "usage": "Press", "tone": "Professional"}],
    },
}


def make_analysis() -> AnalysisResult:
    return AnalysisResult(
        id="a1b2c3",
        url="https://acme.com",
        brand_name="Acme",
        tagline="Rockets for everyone",
        industry="Technology / Software",
        colors=[ColorData(
            hex="#123456",
            rgb=RGB(18, 52, 86),
            cmyk=CMYK(79, 40, 0, 66),
            name="Deep Sapphire",
            usage=ColorUsage.PRIMARY,
        )],
        fonts=[FontData(
            family="Inter",
            category=FontCategory.SANS_SERIF,
            weights=["400", "700"],
            styles=["normal"],
            usage=FontUsage.HEADING,
            source="google",
        )],
        logos=[LogoData(url="https://acme.com/logo.svg", format="svg", variant=LogoVariant.PRIMARY)],
        content=ExtractedContent(
            title="Acme",
            hero_heading="Welcome to Acme",
            value_props=["Reusable: Fly again"],
            ctas=["Get started"],
        ),
        analyzed_at=datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def analysis() -> AnalysisResult:
    return make_analysis()


class FakeLLM:
    """Stands in for generate_structured_content.

    `calls` logs (system_prompt, user_prompt, response_model); `failures` maps
    a response model to the exception raised when it is requested.
    """

    def __init__(self):
        self.calls = []
        self.failures = {}

    def __call__(self, system_prompt, user_prompt, response_model=None, **kwargs):
        self.calls.append((system_prompt, user_prompt, response_model))
        if response_model in self.failures:
            raise self.failures[response_model]
        return response_model.model_validate(SECTION_REPLIES[response_model.__name__])


@pytest.fixture
def fake_llm(monkeypatch) -> FakeLLM:
    llm = FakeLLM()
    monkeypatch.setattr(generator_module, "generate_structured_content", llm)
    return llm
