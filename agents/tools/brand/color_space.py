"""Color-space conversions, naming and perceptual helpers.

Everything here is pure. Hex strings passed in are expected to be valid
6-digit colors (with or without '#'); use normalize_hex() on raw input first.
"""

import math
import re
from typing import Iterable, List, Optional

from agents.domain.models import RGB, CMYK, HSL
from agents.config import NEAR_WHITE_BRIGHTNESS, NEAR_BLACK_BRIGHTNESS

_HEX_BODY = re.compile(r'[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8}')

# Rough approximation only; not a Pantone library
PANTONE_APPROXIMATIONS = {
    '#FF0000': '185 C',
    '#0000FF': '286 C',
    '#00FF00': '354 C',
    '#FFFF00': '102 C',
    '#FF6600': '151 C',
    '#660099': '2685 C',
    '#009999': '320 C',
    '#000000': 'Black C',
    '#FFFFFF': 'White',
}
PANTONE_MAX_DISTANCE = 100

GRAYSCALE_NAMES = [
    (15, 'Midnight'),
    (30, 'Charcoal'),
    (45, 'Storm'),
    (60, 'Fog'),
    (75, 'Mist'),
    (90, 'Cloud'),
]

# [start, end) hue ranges in degrees
HUE_NAMES = [
    (0, 15, 'Ruby'),
    (15, 30, 'Coral'),
    (30, 45, 'Sunset'),
    (45, 60, 'Amber'),
    (60, 75, 'Gold'),
    (75, 90, 'Citrus'),
    (90, 120, 'Lime'),
    (120, 150, 'Emerald'),
    (150, 180, 'Teal'),
    (180, 200, 'Ocean'),
    (200, 220, 'Azure'),
    (220, 250, 'Sapphire'),
    (250, 270, 'Indigo'),
    (270, 290, 'Violet'),
    (290, 320, 'Orchid'),
    (320, 345, 'Rose'),
    (345, 360, 'Crimson'),
]


def _round(value: float) -> int:
    """Round half up, so 0.5 boundaries do not flip with banker's rounding."""
    return int(math.floor(value + 0.5))


def _clamp(value: int) -> int:
    return max(0, min(255, int(value)))


def normalize_hex(value: str) -> Optional[str]:
    """Convert a 3/4/6/8-digit hex literal to canonical '#RRGGBB'.

    Short forms are expanded by doubling each channel and any alpha channel
    is dropped. Returns None when the value is not a hex color.
    """
    body = (value or '').strip().lstrip('#')
    if not _HEX_BODY.fullmatch(body):
        return None
    body = body.upper()
    if len(body) in (3, 4):
        body = ''.join(ch * 2 for ch in body[:3])
    return '#' + body[:6]


def hex_to_rgb(hex_color: str) -> RGB:
    value = int(hex_color.lstrip('#'), 16)
    return RGB((value >> 16) & 255, (value >> 8) & 255, value & 255)


def rgb_to_hex(rgb: RGB) -> str:
    return '#{:02X}{:02X}{:02X}'.format(_clamp(rgb.r), _clamp(rgb.g), _clamp(rgb.b))


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0, 0, 0, 100)
    c = _round((1 - r - k) / (1 - k) * 100)
    m = _round((1 - g - k) / (1 - k) * 100)
    y = _round((1 - b - k) / (1 - k) * 100)
    return CMYK(c, m, y, _round(k * 100))


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    l = (max_val + min_val) / 2

    if max_val == min_val:
        return HSL(0, 0, _round(l * 100))

    d = max_val - min_val
    s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)

    if max_val == r:
        h = ((g - b) / d + (6 if g < b else 0)) / 6
    elif max_val == g:
        h = ((b - r) / d + 2) / 6
    else:
        h = ((r - g) / d + 4) / 6

    return HSL(_round(h * 360), _round(s * 100), _round(l * 100))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL (degrees, percent, percent) to canonical hex."""
    h = h % 360
    s = s / 100
    l = l / 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0
    elif h < 120:
        r, g, b = x, c, 0
    elif h < 180:
        r, g, b = 0, c, x
    elif h < 240:
        r, g, b = 0, x, c
    elif h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return rgb_to_hex(RGB(_round((r + m) * 255), _round((g + m) * 255), _round((b + m) * 255)))


def perceived_brightness(rgb: RGB) -> float:
    """YIQ brightness on the 0-255 scale."""
    return (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000


def is_near_white_or_black(hex_color: str) -> bool:
    brightness = perceived_brightness(hex_to_rgb(hex_color))
    return brightness > NEAR_WHITE_BRIGHTNESS or brightness < NEAR_BLACK_BRIGHTNESS


def color_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance in RGB space."""
    return math.sqrt((a.r - b.r) ** 2 + (a.g - b.g) ** 2 + (a.b - b.b) ** 2)


def generate_color_name(hex_color: str) -> str:
    """Give a color an evocative name from its hue and lightness."""
    hsl = rgb_to_hsl(hex_to_rgb(hex_color))

    if hsl.s < 10:
        for upper, name in GRAYSCALE_NAMES:
            if hsl.l < upper:
                return name
        return 'Frost'

    for start, end, name in HUE_NAMES:
        if start <= hsl.h < end:
            if hsl.l < 30:
                return f'Deep {name}'
            if hsl.l > 70:
                return f'Light {name}'
            return name

    # Hue rounded up to 360
    return 'Aurora'


def relative_luminance(rgb: RGB) -> float:
    """Relative luminance per WCAG 2.x."""

    def channel(value: int) -> float:
        v = value / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(rgb.r) + 0.7152 * channel(rgb.g) + 0.0722 * channel(rgb.b)


def get_contrast_ratio(hex1: str, hex2: str) -> float:
    l1 = relative_luminance(hex_to_rgb(hex1))
    l2 = relative_luminance(hex_to_rgb(hex2))
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def deduplicate_colors(colors: Iterable[str], threshold: float = 30) -> List[str]:
    """Greedy, order-preserving collapse of near-identical colors.

    A color is kept only if it is at least `threshold` away from every color
    kept before it, so earlier entries always win. Exact repeats are dropped
    even when the threshold is 0.
    """
    unique: List[str] = []
    accepted: List[RGB] = []
    for color in colors:
        rgb = hex_to_rgb(color)
        if any(rgb == kept or color_distance(rgb, kept) < threshold for kept in accepted):
            continue
        unique.append(color)
        accepted.append(rgb)
    return unique


def find_nearest_pantone(hex_color: str) -> Optional[str]:
    """Nearest entry of a small approximation table, if within range."""
    target = hex_to_rgb(hex_color)
    closest: Optional[str] = None
    min_distance = float('inf')
    for pantone_hex, pantone_name in PANTONE_APPROXIMATIONS.items():
        distance = color_distance(target, hex_to_rgb(pantone_hex))
        if distance < min_distance and distance < PANTONE_MAX_DISTANCE:
            min_distance = distance
            closest = pantone_name
    return closest
