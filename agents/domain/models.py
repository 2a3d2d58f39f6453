"""
Domain models for website brand analysis.

Candidate records (ColorCandidate, FontCandidate, LogoCandidate) only live
inside one extraction call. The *Data records are what escapes into an
AnalysisResult and are serialized with the camelCase keys the frontend uses.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Set
from datetime import datetime, timezone
from enum import Enum


@dataclass(frozen=True)
class RGB:
    """Channels are integers 0-255."""
    r: int
    g: int
    b: int

    def to_dict(self) -> Dict[str, int]:
        return {'r': self.r, 'g': self.g, 'b': self.b}


@dataclass(frozen=True)
class CMYK:
    """Components are percentages 0-100."""
    c: int
    m: int
    y: int
    k: int

    def to_dict(self) -> Dict[str, int]:
        return {'c': self.c, 'm': self.m, 'y': self.y, 'k': self.k}


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""
    h: int
    s: int
    l: int


class ColorUsage(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    BACKGROUND = "background"
    TEXT = "text"


class FontUsage(str, Enum):
    HEADING = "heading"
    BODY = "body"
    ACCENT = "accent"


class FontCategory(str, Enum):
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    DISPLAY = "display"
    HANDWRITING = "handwriting"


class LogoVariant(str, Enum):
    PRIMARY = "primary"
    REVERSED = "reversed"
    ICON = "icon"
    STACKED = "stacked"
    HORIZONTAL = "horizontal"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

@dataclass
class ColorCandidate:
    """A color occurrence tally keyed by its canonical #RRGGBB hex."""
    hex: str
    count: int = 0
    contexts: Set[str] = field(default_factory=set)

    def record(self, context: str) -> None:
        self.count += 1
        self.contexts.add(context)


@dataclass
class ColorData:
    hex: str
    rgb: RGB
    cmyk: CMYK
    name: str
    usage: ColorUsage
    pantone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'hex': self.hex,
            'rgb': self.rgb.to_dict(),
            'cmyk': self.cmyk.to_dict(),
            'name': self.name,
            'usage': self.usage.value,
        }
        if self.pantone:
            data['pantone'] = self.pantone
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ColorData':
        rgb = data.get('rgb') or {}
        cmyk = data.get('cmyk') or {}
        return cls(
            hex=data['hex'],
            rgb=RGB(rgb.get('r', 0), rgb.get('g', 0), rgb.get('b', 0)),
            cmyk=CMYK(cmyk.get('c', 0), cmyk.get('m', 0), cmyk.get('y', 0), cmyk.get('k', 0)),
            name=data.get('name', ''),
            usage=ColorUsage(data.get('usage', 'accent')),
            pantone=data.get('pantone'),
        )


# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------

@dataclass
class FontCandidate:
    """Typeface tally. `family` keeps the casing of its first occurrence."""
    family: str
    count: int = 0
    contexts: Set[str] = field(default_factory=set)
    weights: Set[str] = field(default_factory=set)
    styles: Set[str] = field(default_factory=lambda: {'normal'})

    def record(self, context: str) -> None:
        self.count += 1
        self.contexts.add(context)


@dataclass
class FontData:
    family: str
    category: FontCategory
    weights: List[str]
    styles: List[str]
    usage: FontUsage
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'family': self.family,
            'category': self.category.value,
            'weights': list(self.weights),
            'styles': list(self.styles),
            'usage': self.usage.value,
            'source': self.source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FontData':
        return cls(
            family=data['family'],
            category=FontCategory(data.get('category', 'sans-serif')),
            weights=list(data.get('weights', [])),
            styles=list(data.get('styles', [])),
            usage=FontUsage(data.get('usage', 'accent')),
            source=data.get('source', 'system'),
        )


# ---------------------------------------------------------------------------
# Logos
# ---------------------------------------------------------------------------

@dataclass
class LogoCandidate:
    url: str
    type: str  # "image" | "svg"
    context: str
    priority: int
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class LogoData:
    url: str
    format: str
    variant: LogoVariant
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'url': self.url,
            'format': self.format,
            'variant': self.variant.value,
        }
        for key in ('width', 'height', 'alt'):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LogoData':
        return cls(
            url=data['url'],
            format=data.get('format', 'png'),
            variant=LogoVariant(data.get('variant', 'stacked')),
            width=data.get('width'),
            height=data.get('height'),
            alt=data.get('alt'),
        )


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

@dataclass
class ContactInfo:
    email: List[str] = field(default_factory=list)
    phone: List[str] = field(default_factory=list)
    address: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'email': list(self.email), 'phone': list(self.phone)}
        if self.address:
            data['address'] = self.address
        return data


@dataclass
class ExtractedContent:
    title: str = ""
    description: str = ""
    hero_heading: str = ""
    hero_subtext: str = ""
    headings: List[str] = field(default_factory=list)
    paragraphs: List[str] = field(default_factory=list)
    value_props: List[str] = field(default_factory=list)
    testimonials: List[str] = field(default_factory=list)
    ctas: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    social_links: List[str] = field(default_factory=list)
    contact_info: ContactInfo = field(default_factory=ContactInfo)
    about_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'heroHeading': self.hero_heading,
            'heroSubtext': self.hero_subtext,
            'headings': list(self.headings),
            'paragraphs': list(self.paragraphs),
            'valueProps': list(self.value_props),
            'testimonials': list(self.testimonials),
            'ctas': list(self.ctas),
            'keywords': list(self.keywords),
            'socialLinks': list(self.social_links),
            'contactInfo': self.contact_info.to_dict(),
            'aboutText': self.about_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtractedContent':
        contact = data.get('contactInfo') or {}
        return cls(
            title=data.get('title', ''),
            description=data.get('description', ''),
            hero_heading=data.get('heroHeading', ''),
            hero_subtext=data.get('heroSubtext', ''),
            headings=list(data.get('headings', [])),
            paragraphs=list(data.get('paragraphs', [])),
            value_props=list(data.get('valueProps', [])),
            testimonials=list(data.get('testimonials', [])),
            ctas=list(data.get('ctas', [])),
            keywords=list(data.get('keywords', [])),
            social_links=list(data.get('socialLinks', [])),
            contact_info=ContactInfo(
                email=list(contact.get('email', [])),
                phone=list(contact.get('phone', [])),
                address=contact.get('address'),
            ),
            about_text=data.get('aboutText', ''),
        )


# ---------------------------------------------------------------------------
# Aggregate root
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis run learned about a website."""
    id: str
    url: str
    brand_name: str
    colors: List[ColorData]
    fonts: List[FontData]
    logos: List[LogoData]
    content: ExtractedContent
    analyzed_at: datetime
    tagline: Optional[str] = None
    industry: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'url': self.url,
            'brandName': self.brand_name,
            'tagline': self.tagline,
            'industry': self.industry,
            'colors': [c.to_dict() for c in self.colors],
            'fonts': [f.to_dict() for f in self.fonts],
            'logos': [l.to_dict() for l in self.logos],
            'content': self.content.to_dict(),
            'analyzedAt': self.analyzed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisResult':
        analyzed_at = data.get('analyzedAt')
        if isinstance(analyzed_at, str):
            analyzed_at = datetime.fromisoformat(analyzed_at.replace('Z', '+00:00'))
        elif not isinstance(analyzed_at, datetime):
            analyzed_at = datetime.now(timezone.utc)
        return cls(
            id=data['id'],
            url=data['url'],
            brand_name=data.get('brandName', ''),
            colors=[ColorData.from_dict(c) for c in data.get('colors', [])],
            fonts=[FontData.from_dict(f) for f in data.get('fonts', [])],
            logos=[LogoData.from_dict(l) for l in data.get('logos', [])],
            content=ExtractedContent.from_dict(data.get('content') or {}),
            analyzed_at=analyzed_at,
            tagline=data.get('tagline'),
            industry=data.get('industry'),
        )


@dataclass
class AnalysisProgress:
    step: int
    total_steps: int
    message: str
    percentage: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'step': self.step,
            'totalSteps': self.total_steps,
            'message': self.message,
            'percentage': self.percentage,
        }


@dataclass
class GenerationProgress:
    """Progress of the guidelines generation stage; `section` names the step."""
    step: int
    total_steps: int
    message: str
    percentage: int
    section: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'step': self.step,
            'totalSteps': self.total_steps,
            'message': self.message,
            'percentage': self.percentage,
        }
        if self.section:
            data['section'] = self.section
        return data
