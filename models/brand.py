from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime

# Field names mirror the camelCase JSON the model is asked for and the
# frontend consumes, so model_dump(by_alias=True) is the wire format.


class BrandSectionBase(BaseModel):
    """Base for LLM-produced sections; unknown keys are ignored"""
    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
    }


# ---------------------------------------------------------------------------
# Strategy
# ---------------------------------------------------------------------------

class BrandPositioning(BrandSectionBase):
    statement: str
    targetAudience: str
    marketCategory: str
    competitiveAdvantage: str
    reasonToBelieve: str


class BrandMission(BrandSectionBase):
    statement: str
    explanation: str = ""


class BrandVision(BrandSectionBase):
    statement: str
    timeframe: str = ""


class BrandPromise(BrandSectionBase):
    promise: str
    delivery: str = ""


class PersonalityTrait(BrandSectionBase):
    trait: str
    description: str
    behaviors: List[str] = Field(default_factory=list)


class BrandArchetype(BrandSectionBase):
    primary: str
    secondary: str = ""
    description: str = ""


class BrandStrategy(BrandSectionBase):
    positioning: BrandPositioning
    mission: BrandMission
    vision: BrandVision
    personality: List[PersonalityTrait]
    archetype: BrandArchetype
    brandPromise: BrandPromise
    boilerplate: str


# ---------------------------------------------------------------------------
# Messaging
# ---------------------------------------------------------------------------

class BrandPillar(BrandSectionBase):
    name: str
    description: str
    proofPoints: List[str] = Field(default_factory=list)


class ValueProposition(BrandSectionBase):
    headline: str
    subheadline: str = ""
    audience: str = ""


class KeyMessage(BrandSectionBase):
    message: str
    context: str = ""
    audience: str = ""


class ElevatorPitches(BrandSectionBase):
    fifteenSecond: str = Field(alias="15second")
    thirtySecond: str = Field(alias="30second")
    sixtySecond: str = Field(alias="60second")


class MessagingFrameworks(BrandSectionBase):
    pillars: List[BrandPillar]
    valuePropositions: List[ValueProposition]
    keyMessages: List[KeyMessage]
    elevatorPitches: ElevatorPitches


# ---------------------------------------------------------------------------
# Verbal expression
# ---------------------------------------------------------------------------

class VoiceToneItem(BrandSectionBase):
    attribute: str
    description: str
    doExample: str = ""
    dontExample: str = ""


class ToneSpectrum(BrandSectionBase):
    dimension: str
    position: int = Field(ge=0, le=100, description="0 = left pole, 100 = right pole")
    description: str = ""


class WritingStyle(BrandSectionBase):
    sentenceLength: str = ""
    vocabulary: str = ""
    punctuation: str = ""
    formatting: str = ""


class StyleRule(BrandSectionBase):
    category: str
    rule: str
    example: str = ""


class Appositive(BrandSectionBase):
    phrase: str
    usage: str = ""
    tone: str = ""


class VerbalExpression(BrandSectionBase):
    voiceTone: List[VoiceToneItem]
    toneSpectrum: List[ToneSpectrum]
    writingStyle: WritingStyle
    styleRules: List[StyleRule]
    appositives: List[Appositive]


# ---------------------------------------------------------------------------
# Visual guidelines
# ---------------------------------------------------------------------------

class LogoVersion(BrandSectionBase):
    name: str
    usage: str
    background: str = ""


class LogoClearSpace(BrandSectionBase):
    rule: str
    minimumSize: str = ""


class LogoPlacement(BrandSectionBase):
    preferred: List[str] = Field(default_factory=list)
    cobranding: str = ""


class LogoGuidelines(BrandSectionBase):
    versions: List[LogoVersion]
    clearSpace: LogoClearSpace
    donts: List[str]
    placement: LogoPlacement


class TypefaceSpec(BrandSectionBase):
    name: str
    usage: str = ""
    weights: List[str] = Field(default_factory=list)
    characteristics: str = ""


class TypeHierarchyLevel(BrandSectionBase):
    size: str
    weight: str
    lineHeight: str
    usage: str = ""


class TypeHierarchy(BrandSectionBase):
    h1: TypeHierarchyLevel
    h2: TypeHierarchyLevel
    h3: TypeHierarchyLevel
    h4: TypeHierarchyLevel
    body: TypeHierarchyLevel
    small: TypeHierarchyLevel


class TypographyGuidelines(BrandSectionBase):
    primaryTypeface: TypefaceSpec
    secondaryTypeface: TypefaceSpec
    hierarchy: TypeHierarchy
    guidelines: List[str]


class ColorCombination(BrandSectionBase):
    name: str
    background: str
    text: str
    accent: str
    usage: str = ""


class ColorAccessibility(BrandSectionBase):
    minimumContrast: str
    guidelines: List[str] = Field(default_factory=list)


class ColorGuidelines(BrandSectionBase):
    principles: List[str]
    usage: Dict[str, List[str]]
    combinations: List[ColorCombination]
    accessibility: ColorAccessibility


class PatternGuidelines(BrandSectionBase):
    description: str
    usage: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Per-step LLM responses (the JSON shapes the prompts ask for)
# ---------------------------------------------------------------------------

class PositioningResponse(BrandSectionBase):
    positioning: BrandPositioning
    mission: BrandMission
    vision: BrandVision
    brandPromise: BrandPromise
    boilerplate: str


class PersonalityResponse(BrandSectionBase):
    personalityTraits: List[PersonalityTrait]
    brandArchetype: BrandArchetype


class MessagingResponse(BrandSectionBase):
    brandPillars: List[BrandPillar]
    valuePropositions: List[ValueProposition]
    keyMessages: List[KeyMessage]
    elevator: ElevatorPitches


class VoiceToneResponse(BrandSectionBase):
    voiceAttributes: List[VoiceToneItem]
    toneSpectrum: List[ToneSpectrum]
    writingStyle: WritingStyle
    styleRules: List[StyleRule]


class TypographyResponse(BrandSectionBase):
    primaryTypeface: TypefaceSpec
    secondaryTypeface: TypefaceSpec
    hierarchy: TypeHierarchy
    guidelines: List[str]


class LogoGuidelinesResponse(BrandSectionBase):
    logoVersions: List[LogoVersion]
    clearSpace: LogoClearSpace
    donts: List[str]
    placement: LogoPlacement


class ColorGuidelinesResponse(BrandSectionBase):
    colorPrinciples: List[str]
    primaryUsage: Dict[str, List[str]]
    combinations: List[ColorCombination]
    accessibility: ColorAccessibility


class AppositivesResponse(BrandSectionBase):
    appositives: List[Appositive]


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------

class CompleteBrandData(BrandSectionBase):
    """Everything the brand guidelines document is rendered from"""
    id: str
    url: str
    brandName: str
    tagline: Optional[str] = None
    industry: Optional[str] = None
    year: int
    colors: List[Dict[str, Any]] = Field(default_factory=list)  # ColorData.to_dict()
    fonts: List[Dict[str, Any]] = Field(default_factory=list)   # FontData.to_dict()
    logos: List[Dict[str, Any]] = Field(default_factory=list)   # LogoData.to_dict()
    brandStrategy: BrandStrategy
    messaging: MessagingFrameworks
    verbalExpression: VerbalExpression
    logoGuidelines: LogoGuidelines
    colorGuidelines: ColorGuidelines
    typographyGuidelines: TypographyGuidelines
    patternGuidelines: PatternGuidelines
    createdAt: datetime


class AnalyzeRequest(BaseModel):
    url: Optional[Any] = None  # validated by the route so bad input gets a 400


class GenerateRequest(BaseModel):
    analysisData: Optional[Dict[str, Any]] = None
