"""Typeface extraction from CSS declarations, @font-face, font links and inline styles."""

import re
from typing import Dict, Iterable, List, Optional, Set
from urllib.parse import unquote

from bs4 import BeautifulSoup

from agents.config import FONT_OUTPUT_LIMIT
from agents.domain.models import FontCandidate, FontCategory, FontData, FontUsage
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

FONT_FAMILY_PATTERN = re.compile(r'font-family\s*:\s*([^;!}]+)', re.IGNORECASE)
FONT_SHORTHAND_PATTERN = re.compile(r'(?<![-\w])font\s*:\s*([^;!}]+)', re.IGNORECASE)
FONT_FACE_PATTERN = re.compile(r'@font-face\s*\{[^}]*\}', re.IGNORECASE)
FONT_WEIGHT_PATTERN = re.compile(r'font-weight\s*:\s*(\d+|normal|bold|lighter|bolder)', re.IGNORECASE)
FONT_STYLE_PATTERN = re.compile(r'font-style\s*:\s*(normal|italic|oblique)', re.IGNORECASE)
GOOGLE_FAMILY_PARAM = re.compile(r'family=([^&]+)')
WEIGHT_TOKEN = re.compile(r'(?<!\d)\d{3}(?!\d)')
LINE_HEIGHT_SLASH = re.compile(r'\s*/\s*')

WEIGHT_KEYWORDS = {
    'normal': '400',
    'bold': '700',
    'lighter': '300',
    'bolder': '700',
}

GENERIC_FAMILIES = {
    'serif', 'sans-serif', 'monospace', 'cursive', 'fantasy',
    'system-ui', 'ui-serif', 'ui-sans-serif', 'ui-monospace', 'ui-rounded',
    'inherit', 'initial', 'unset',
    '-apple-system', 'blinkmacsystemfont', 'segoe ui',
}

SERIF_KEYWORDS = [
    'times', 'georgia', 'garamond', 'palatino', 'baskerville', 'didot', 'bodoni',
    'playfair', 'merriweather', 'lora', 'noto serif', 'source serif',
    'libre baskerville', 'crimson', 'bitter', 'vollkorn', 'cormorant',
]
MONO_KEYWORDS = [
    'mono', 'code', 'consolas', 'courier', 'menlo', 'monaco', 'fira code',
    'source code', 'jetbrains', 'inconsolata', 'roboto mono',
]
DISPLAY_KEYWORDS = [
    'display', 'poster', 'headline', 'impact', 'lobster', 'pacifico', 'bebas',
    'oswald', 'anton', 'abril', 'righteous', 'archivo black',
]
HANDWRITING_KEYWORDS = [
    'caveat', 'dancing', 'satisfy', 'kalam', 'indie flower',
    'shadows into light', 'permanent marker', 'script', 'hand',
]


def clean_family(raw: str) -> str:
    return raw.strip().strip('\'"').strip()


def is_generic_family(family: str) -> bool:
    return family.lower() in GENERIC_FAMILIES


def split_family_list(value: str) -> List[str]:
    """'"Helvetica Neue", Arial, sans-serif' -> ['Helvetica Neue', 'Arial', 'sans-serif']

    Pieces of CSS functions such as var() are not family names and are dropped.
    """
    families = (clean_family(part) for part in value.split(','))
    return [f for f in families if f and '(' not in f and ')' not in f]


def shorthand_families(value: str) -> List[str]:
    """Families of a `font:` shorthand, i.e. everything after the size token."""
    # "12px / 1.5" and "12px/1.5" are the same size token
    tokens = LINE_HEIGHT_SLASH.sub('/', value.strip()).split()
    for index, token in enumerate(tokens):
        # bare integers are weights, the size always carries a unit or line-height
        if any(ch.isdigit() for ch in token) and not token.isdigit():
            return split_family_list(' '.join(tokens[index + 1:]))
    return []


def categorize_font(family: str) -> FontCategory:
    lowered = family.lower()
    if any(k in lowered for k in SERIF_KEYWORDS):
        return FontCategory.SERIF
    if any(k in lowered for k in MONO_KEYWORDS):
        return FontCategory.MONOSPACE
    if any(k in lowered for k in DISPLAY_KEYWORDS):
        return FontCategory.DISPLAY
    if any(k in lowered for k in HANDWRITING_KEYWORDS):
        return FontCategory.HANDWRITING
    return FontCategory.SANS_SERIF


def parse_google_fonts_url(href: str) -> List[FontCandidate]:
    """Families and weights from a fonts.googleapis.com URL.

    Handles both `family=Roboto:400,700|Lato` and the css2
    `family=Inter:wght@400;600&family=Lora` forms.
    """
    candidates = []
    for param in GOOGLE_FAMILY_PARAM.findall(href):
        for spec in unquote(param.replace('+', ' ')).split('|'):
            name, _, variants = spec.partition(':')
            family = clean_family(name)
            if not family:
                continue
            candidate = FontCandidate(family=family)
            candidate.weights.update(WEIGHT_TOKEN.findall(variants))
            if 'ital' in variants:
                candidate.styles.add('italic')
            candidates.append(candidate)
    return candidates


class FontTally:
    """Case-insensitive family aggregation for one extraction call."""

    def __init__(self) -> None:
        self.candidates: Dict[str, FontCandidate] = {}

    def _entry(self, family: str) -> Optional[FontCandidate]:
        family = clean_family(family)
        if not family or is_generic_family(family):
            return None
        key = family.lower()
        candidate = self.candidates.get(key)
        if candidate is None:
            candidate = self.candidates[key] = FontCandidate(family=family)
        return candidate

    def add(self, family: str, context: str,
            weights: Iterable[str] = (), styles: Iterable[str] = ()) -> None:
        candidate = self._entry(family)
        if candidate is None:
            return
        candidate.record(context)
        candidate.weights.update(weights)
        candidate.styles.update(styles)

    def ranked(self) -> List[FontCandidate]:
        return sorted(self.candidates.values(), key=lambda c: c.count, reverse=True)


def _scan_stylesheet(css: str, tally: FontTally) -> None:
    for match in FONT_FAMILY_PATTERN.finditer(css):
        for family in split_family_list(match.group(1)):
            tally.add(family, 'css-font-family')

    for match in FONT_SHORTHAND_PATTERN.finditer(css):
        for family in shorthand_families(match.group(1)):
            tally.add(family, 'css-font-shorthand')

    for block in FONT_FACE_PATTERN.findall(css):
        family_match = FONT_FAMILY_PATTERN.search(block)
        if not family_match:
            continue
        families = split_family_list(family_match.group(1))
        if not families:
            continue
        weights: Set[str] = set()
        styles: Set[str] = set()
        weight_match = FONT_WEIGHT_PATTERN.search(block)
        if weight_match:
            weight = weight_match.group(1).lower()
            weights.add(WEIGHT_KEYWORDS.get(weight, weight))
        style_match = FONT_STYLE_PATTERN.search(block)
        if style_match:
            styles.add(style_match.group(1).lower())
        tally.add(families[0], 'font-face', weights, styles)


def extract_fonts(soup: BeautifulSoup, styles: Iterable[str]) -> List[FontData]:
    """Rank the typefaces a page declares, dropping generic CSS families."""
    tally = FontTally()

    for css in styles:
        _scan_stylesheet(css, tally)

    for link in soup.select('link[href*="fonts.googleapis.com"], link[href*="fonts.gstatic.com"]'):
        for parsed in parse_google_fonts_url(link.get('href', '')):
            tally.add(parsed.family, 'google-fonts', parsed.weights, parsed.styles)

    for element in soup.select('[style*="font"]'):
        match = FONT_FAMILY_PATTERN.search(element.get('style', ''))
        if match:
            for family in split_family_list(match.group(1)):
                tally.add(family, 'inline-style')

    fonts = []
    for index, candidate in enumerate(tally.ranked()[:FONT_OUTPUT_LIMIT]):
        if index == 0:
            usage = FontUsage.HEADING
        elif index == 1:
            usage = FontUsage.BODY
        else:
            usage = FontUsage.ACCENT
        fonts.append(FontData(
            family=candidate.family,
            category=categorize_font(candidate.family),
            weights=sorted(candidate.weights),
            styles=sorted(candidate.styles),
            usage=usage,
            source='google' if 'google-fonts' in candidate.contexts else 'system',
        ))

    logger.info(f"Extracted {len(fonts)} fonts from {len(tally.candidates)} candidates")
    return fonts
