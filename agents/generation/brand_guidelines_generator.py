"""
Brand guidelines generation.

Runs the seven prompt steps against the LLM and assembles a CompleteBrandData
from the validated sections plus the colors, fonts and logos of the analysis.
"""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Type, TypeVar

from pydantic import BaseModel

from agents.ai.clients import generate_structured_content
from agents.domain.models import AnalysisResult, GenerationProgress
from agents.prompts.generation import brand_prompts
from models.brand import (
    AppositivesResponse,
    BrandStrategy,
    ColorGuidelines,
    ColorGuidelinesResponse,
    CompleteBrandData,
    LogoGuidelines,
    LogoGuidelinesResponse,
    MessagingFrameworks,
    MessagingResponse,
    PatternGuidelines,
    PersonalityResponse,
    PositioningResponse,
    TypographyGuidelines,
    TypographyResponse,
    VerbalExpression,
    VoiceToneResponse,
)
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

GenerationProgressCallback = Callable[[GenerationProgress], None]
T = TypeVar('T', bound=BaseModel)

TOTAL_STEPS = 7

DEFAULT_PATTERN_GUIDELINES = PatternGuidelines(
    description='Patterns can be derived from the brand colors and logo elements to create visual texture and interest.',
    usage=['Background textures', 'Section dividers', 'Presentation slides', 'Marketing materials'],
    examples=[],
)


class BrandGuidelinesGenerator:
    """Generates brand guidelines for one analysis."""

    def __init__(self, analysis: AnalysisResult, on_progress: Optional[GenerationProgressCallback] = None):
        self.analysis = analysis
        self.on_progress = on_progress
        self.system_prompt = brand_prompts.get_brand_strategy_system_prompt()

    def _report(self, step: int, message: str, section: str) -> None:
        if self.on_progress is None:
            return
        try:
            self.on_progress(GenerationProgress(
                step=step,
                total_steps=TOTAL_STEPS,
                message=message,
                percentage=round(step / TOTAL_STEPS * 100),
                section=section,
            ))
        except Exception as e:
            logger.warning(f"Generation progress callback failed at step {step}: {e}")

    async def _generate(self, user_prompt: str, response_model: Type[T]) -> T:
        # The Anthropic client is synchronous; keep the event loop free
        return await asyncio.to_thread(
            generate_structured_content, self.system_prompt, user_prompt, response_model
        )

    async def generate(self) -> CompleteBrandData:
        analysis = self.analysis
        logger.info(f"Generating brand guidelines for {analysis.brand_name} ({analysis.url})")

        self._report(1, 'Generating brand positioning...', 'positioning')
        positioning = await self._generate(
            brand_prompts.get_brand_positioning_prompt(analysis), PositioningResponse)

        self._report(2, 'Defining brand personality...', 'personality')
        personality = await self._generate(
            brand_prompts.get_brand_personality_prompt(analysis), PersonalityResponse)

        self._report(3, 'Creating messaging framework...', 'messaging')
        messaging = await self._generate(
            brand_prompts.get_messaging_framework_prompt(analysis), MessagingResponse)

        self._report(4, 'Establishing voice and tone...', 'voice')
        voice = await self._generate(
            brand_prompts.get_voice_tone_prompt(analysis), VoiceToneResponse)

        self._report(5, 'Creating typography guidelines...', 'typography')
        typography = await self._generate(
            brand_prompts.get_typography_guidelines_prompt(analysis), TypographyResponse)

        self._report(6, 'Defining visual guidelines...', 'visual')
        logo, color = await asyncio.gather(
            self._generate(brand_prompts.get_logo_guidelines_prompt(analysis), LogoGuidelinesResponse),
            self._generate(brand_prompts.get_color_guidelines_prompt(analysis), ColorGuidelinesResponse),
        )

        self._report(7, 'Finalizing brand elements...', 'final')
        appositives = await self._generate(
            brand_prompts.get_appositive_prompt(analysis), AppositivesResponse)

        now = datetime.now(timezone.utc)
        brand_data = CompleteBrandData(
            id=uuid.uuid4().hex,
            url=analysis.url,
            brandName=analysis.brand_name,
            tagline=analysis.tagline,
            industry=analysis.industry,
            year=now.year,
            colors=[c.to_dict() for c in analysis.colors],
            fonts=[f.to_dict() for f in analysis.fonts],
            logos=[l.to_dict() for l in analysis.logos],
            brandStrategy=BrandStrategy(
                positioning=positioning.positioning,
                mission=positioning.mission,
                vision=positioning.vision,
                personality=personality.personalityTraits,
                archetype=personality.brandArchetype,
                brandPromise=positioning.brandPromise,
                boilerplate=positioning.boilerplate,
            ),
            messaging=MessagingFrameworks(
                pillars=messaging.brandPillars,
                valuePropositions=messaging.valuePropositions,
                keyMessages=messaging.keyMessages,
                elevatorPitches=messaging.elevator,
            ),
            verbalExpression=VerbalExpression(
                voiceTone=voice.voiceAttributes,
                toneSpectrum=voice.toneSpectrum,
                writingStyle=voice.writingStyle,
                styleRules=voice.styleRules,
                appositives=appositives.appositives,
            ),
            logoGuidelines=LogoGuidelines(
                versions=logo.logoVersions,
                clearSpace=logo.clearSpace,
                donts=logo.donts,
                placement=logo.placement,
            ),
            colorGuidelines=ColorGuidelines(
                principles=color.colorPrinciples,
                usage=color.primaryUsage,
                combinations=color.combinations,
                accessibility=color.accessibility,
            ),
            typographyGuidelines=TypographyGuidelines(
                primaryTypeface=typography.primaryTypeface,
                secondaryTypeface=typography.secondaryTypeface,
                hierarchy=typography.hierarchy,
                guidelines=typography.guidelines,
            ),
            patternGuidelines=DEFAULT_PATTERN_GUIDELINES.model_copy(deep=True),
            createdAt=now,
        )

        logger.info(f"Brand guidelines ready for {analysis.brand_name}")
        return brand_data


async def generate_brand_guidelines(
    analysis: AnalysisResult,
    on_progress: Optional[GenerationProgressCallback] = None,
) -> CompleteBrandData:
    """Generate complete brand guidelines from an analysis result."""
    return await BrandGuidelinesGenerator(analysis, on_progress).generate()
