"""
Tests for color-space conversions, naming and deduplication.
"""

import random

import pytest

from agents.domain.models import RGB, CMYK, HSL
from agents.tools.brand.color_space import (
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_cmyk,
    rgb_to_hsl,
    hsl_to_hex,
    is_near_white_or_black,
    color_distance,
    generate_color_name,
    get_contrast_ratio,
    deduplicate_colors,
    find_nearest_pantone,
    HUE_NAMES,
)


def test_hex_rgb_round_trip():
    rng = random.Random(7)
    samples = [(0, 0, 0), (255, 255, 255), (18, 52, 86)]
    samples += [(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)) for _ in range(50)]
    for r, g, b in samples:
        rgb = RGB(r, g, b)
        assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


def test_hex_to_rgb_accepts_missing_hash():
    assert hex_to_rgb('#FF8000') == RGB(255, 128, 0)
    assert hex_to_rgb('ff8000') == RGB(255, 128, 0)


def test_normalize_hex_forms_agree():
    forms = ['#abc', '#ABCF', 'aabbcc', '#AaBbCc', '#aabbcc80']
    assert {normalize_hex(f) for f in forms} == {'#AABBCC'}


def test_normalize_hex_rejects_non_colors():
    for value in ['', '#12345', '#ggg', 'red', '#1234567']:
        assert normalize_hex(value) is None


def test_rgb_to_cmyk():
    assert rgb_to_cmyk(RGB(0, 0, 0)) == CMYK(0, 0, 0, 100)
    assert rgb_to_cmyk(RGB(255, 0, 0)) == CMYK(0, 100, 100, 0)
    assert rgb_to_cmyk(RGB(255, 255, 255)) == CMYK(0, 0, 0, 0)


def test_rgb_to_hsl():
    assert rgb_to_hsl(RGB(255, 0, 0)) == HSL(0, 100, 50)
    assert rgb_to_hsl(RGB(0, 0, 255)) == HSL(240, 100, 50)
    # achromatic
    assert rgb_to_hsl(RGB(128, 128, 128)) == HSL(0, 0, 50)


def test_hsl_to_hex():
    assert hsl_to_hex(0, 100, 50) == '#FF0000'
    assert hsl_to_hex(120, 100, 50) == '#00FF00'
    assert hsl_to_hex(240, 100, 50) == '#0000FF'
    assert hsl_to_hex(360, 100, 50) == '#FF0000'


def test_near_white_or_black():
    assert is_near_white_or_black('#FFFFFF')
    assert is_near_white_or_black('#FEFEFE')
    assert is_near_white_or_black('#000000')
    assert is_near_white_or_black('#050505')
    assert not is_near_white_or_black('#123456')
    assert not is_near_white_or_black('#FF0000')


def test_color_names():
    assert generate_color_name('#FF0000') == 'Ruby'
    assert generate_color_name('#800000') == 'Deep Ruby'
    assert generate_color_name('#0000FF') == 'Sapphire'
    assert generate_color_name('#FF9999') == 'Light Ruby'


def test_grayscale_never_gets_hue_name():
    hue_names = {name for _, _, name in HUE_NAMES}
    for hex_color in ['#808080', '#101010', '#EEEEEE', '#7F8080']:
        name = generate_color_name(hex_color)
        assert not any(part in hue_names for part in name.split())
    assert generate_color_name('#808080') == 'Fog'
    assert generate_color_name('#808080') == generate_color_name('#808080')


def test_contrast_ratio():
    assert get_contrast_ratio('#000000', '#FFFFFF') == pytest.approx(21.0)
    assert get_contrast_ratio('#FFFFFF', '#000000') == pytest.approx(21.0)
    assert get_contrast_ratio('#336699', '#336699') == pytest.approx(1.0)


def test_deduplicate_collapses_near_colors_in_order():
    assert deduplicate_colors(['#FF0000', '#FE0101', '#00FF00']) == ['#FF0000', '#00FF00']
    assert deduplicate_colors(['#FE0101', '#FF0000']) == ['#FE0101']


def test_deduplicate_exact_repeats():
    assert deduplicate_colors(['#336699'] * 3) == ['#336699']
    assert deduplicate_colors(['#336699'] * 3, threshold=0) == ['#336699']


def test_deduplicate_respects_threshold_for_any_input():
    rng = random.Random(42)
    colors = ['#{:02X}{:02X}{:02X}'.format(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
              for _ in range(200)]
    for threshold in (0, 10, 30, 80):
        kept = deduplicate_colors(colors, threshold)
        for i, a in enumerate(kept):
            for b in kept[i + 1:]:
                assert color_distance(hex_to_rgb(a), hex_to_rgb(b)) >= threshold


def test_find_nearest_pantone():
    assert find_nearest_pantone('#FF0000') == '185 C'
    assert find_nearest_pantone('#F00505') == '185 C'
    assert find_nearest_pantone('#808080') is None
