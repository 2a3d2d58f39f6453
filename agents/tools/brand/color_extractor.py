"""Brand color extraction from stylesheets and markup."""

import re
from typing import Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from agents.config import COLOR_CANDIDATE_LIMIT, COLOR_DEDUP_THRESHOLD, COLOR_OUTPUT_LIMIT
from agents.domain.models import RGB, ColorCandidate, ColorData, ColorUsage
from agents.tools.brand.color_space import (
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_cmyk,
    hsl_to_hex,
    is_near_white_or_black,
    generate_color_name,
    deduplicate_colors,
    find_nearest_pantone,
)
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

HEX_PATTERN = re.compile(r'#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})\b')
RGB_PATTERN = re.compile(
    r'rgba?\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})(?:\s*,\s*[\d.]+)?\s*\)',
    re.IGNORECASE,
)
HSL_PATTERN = re.compile(
    r'hsla?\s*\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%(?:\s*,\s*[\d.]+)?\s*\)',
    re.IGNORECASE,
)


def _usage_for_rank(index: int) -> ColorUsage:
    if index == 0:
        return ColorUsage.PRIMARY
    if index == 1:
        return ColorUsage.SECONDARY
    if index < 4:
        return ColorUsage.ACCENT
    return ColorUsage.BACKGROUND


def scan_hex_colors(text: str) -> List[str]:
    colors = []
    for match in HEX_PATTERN.finditer(text):
        hex_color = normalize_hex(match.group(1))
        if hex_color:
            colors.append(hex_color)
    return colors


def scan_rgb_colors(text: str) -> List[str]:
    return [
        rgb_to_hex(RGB(int(r), int(g), int(b)))
        for r, g, b in RGB_PATTERN.findall(text)
    ]


def scan_hsl_colors(text: str) -> List[str]:
    return [hsl_to_hex(int(h), int(s), int(l)) for h, s, l in HSL_PATTERN.findall(text)]


def scan_css_colors(text: str) -> List[str]:
    """All hex, rgb() and hsl() colors in a CSS fragment, canonicalized."""
    if not text:
        return []
    return scan_hex_colors(text) + scan_rgb_colors(text) + scan_hsl_colors(text)


class ColorTally:
    """Frequency map of one extraction call, keyed by canonical hex."""

    def __init__(self) -> None:
        self.candidates: Dict[str, ColorCandidate] = {}

    def add(self, hex_color: Optional[str], context: str) -> None:
        if not hex_color or is_near_white_or_black(hex_color):
            return
        candidate = self.candidates.get(hex_color)
        if candidate is None:
            candidate = self.candidates[hex_color] = ColorCandidate(hex=hex_color)
        candidate.record(context)

    def add_all(self, colors: Iterable[str], context: str) -> None:
        for hex_color in colors:
            self.add(hex_color, context)

    def ranked(self) -> List[ColorCandidate]:
        # sorted() is stable, so ties keep first-seen order
        return sorted(self.candidates.values(), key=lambda c: c.count, reverse=True)


def _attr_hex(value) -> Optional[str]:
    """Attribute colors only count in explicit #hex form."""
    value = (value or '').strip()
    return normalize_hex(value) if value.startswith('#') else None


def _collect_markup_colors(soup: BeautifulSoup, tally: ColorTally) -> None:
    for element in soup.find_all(style=True):
        tally.add_all(scan_css_colors(element.get('style', '')), 'inline-style')

    for element in soup.find_all(attrs={'bgcolor': True}):
        tally.add(_attr_hex(element.get('bgcolor')), 'bgcolor-attr')

    for element in soup.find_all(attrs={'color': True}):
        tally.add(_attr_hex(element.get('color')), 'color-attr')

    for svg in soup.find_all('svg'):
        for element in svg.find_all(attrs={'fill': True}):
            tally.add(_attr_hex(element.get('fill')), 'svg-fill')
        for element in svg.find_all(attrs={'stroke': True}):
            tally.add(_attr_hex(element.get('stroke')), 'svg-stroke')
        for style in svg.find_all('style'):
            tally.add_all(scan_css_colors(style.get_text()), 'svg-style')


def extract_colors(soup: BeautifulSoup, styles: Iterable[str]) -> List[ColorData]:
    """Rank the brand palette of a page.

    Colors from every source are tallied, near-white and near-black noise is
    dropped, then the most frequent candidates are collapsed by perceptual
    distance and the top few get a usage by rank.
    """
    tally = ColorTally()
    for css in styles:
        tally.add_all(scan_css_colors(css), 'css')
    _collect_markup_colors(soup, tally)

    top = [c.hex for c in tally.ranked()[:COLOR_CANDIDATE_LIMIT]]
    unique = deduplicate_colors(top, COLOR_DEDUP_THRESHOLD)[:COLOR_OUTPUT_LIMIT]

    colors = []
    for index, hex_color in enumerate(unique):
        rgb = hex_to_rgb(hex_color)
        colors.append(ColorData(
            hex=hex_color,
            rgb=rgb,
            cmyk=rgb_to_cmyk(rgb),
            name=generate_color_name(hex_color),
            usage=_usage_for_rank(index),
            pantone=find_nearest_pantone(hex_color),
        ))

    logger.info(f"Extracted {len(colors)} colors from {len(tally.candidates)} candidates")
    return colors
