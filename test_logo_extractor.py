"""
Tests for logo detection and ranking.
"""

from bs4 import BeautifulSoup

from agents.domain.models import LogoVariant
from agents.tools.brand.logo_extractor import (
    extract_logos,
    LogoCollector,
    PRIORITY_LOGO_IMAGE,
    PRIORITY_SMALL_ICON,
)

BASE_URL = "https://acme.com"


def _logos(html: str):
    return extract_logos(BeautifulSoup(html, "html.parser"), BASE_URL)


def test_logo_class_image_ranks_first():
    html = """
    <html><head><meta property="og:image" content="/social/share.png"></head>
    <body>
      <img src="/photos/team.jpg">
      <img class="site-logo" src="/img/brand.png" width="120" height="40px" alt="Acme">
    </body></html>
    """
    logos = _logos(html)

    assert [l.url for l in logos] == ["https://acme.com/img/brand.png", "https://acme.com/social/share.png"]
    assert logos[0].variant == LogoVariant.PRIMARY
    assert logos[0].format == "png"
    assert logos[0].width == 120
    assert logos[0].height == 40
    assert logos[0].alt == "Acme"


def test_plain_images_outside_header_are_ignored():
    assert _logos('<body><main><img src="/hero.jpg"></main></body>') == []


def test_header_image_beats_icons():
    html = """
    <head><link rel="icon" href="/favicon.ico"></head>
    <body><header><a href="/"><img src="/assets/mark.svg"></a></header></body>
    """
    logos = _logos(html)

    assert logos[0].url == "https://acme.com/assets/mark.svg"
    assert logos[0].format == "svg"
    assert logos[1].url == "https://acme.com/favicon.ico"
    assert logos[1].variant == LogoVariant.ICON


def test_inline_svg_logo_becomes_data_uri():
    html = '<header><svg class="logo" width="100" height="32"><path d="M0 0h10v10z"/></svg></header>'
    logos = _logos(html)

    assert len(logos) == 1
    assert logos[0].url.startswith("data:image/svg+xml,")
    assert "%3Csvg" in logos[0].url
    assert logos[0].format == "svg"
    assert logos[0].width == 100


def test_svg_without_logo_hint_is_ignored():
    assert _logos('<svg class="icon-arrow"><path d="M0 0"/></svg>') == []


def test_large_icons_outrank_small_icons():
    html = """
    <head>
      <link rel="icon" href="/favicon-32.png" sizes="32x32">
      <link rel="apple-touch-icon" href="/apple-touch.png" sizes="180x180">
    </head>
    """
    logos = _logos(html)
    assert [l.url for l in logos] == ["https://acme.com/apple-touch.png", "https://acme.com/favicon-32.png"]


def test_json_ld_logos_including_graph():
    html = """
    <script type="application/ld+json">{not valid json</script>
    <script type="application/ld+json">
      {"@context": "https://schema.org",
       "@graph": [{"@type": "Organization",
                   "logo": {"@type": "ImageObject", "url": "https://cdn.acme.com/org-logo.png"}}]}
    </script>
    <script type="application/ld+json">{"@type": "Organization", "logo": "/brand/mark.webp"}</script>
    """
    logos = _logos(html)
    urls = {l.url for l in logos}

    assert urls == {"https://cdn.acme.com/org-logo.png", "https://acme.com/brand/mark.webp"}
    assert {l.format for l in logos} == {"png", "webp"}


def test_repeat_url_keeps_higher_priority():
    collector = LogoCollector(BASE_URL)
    collector.add("/logo.png", "image", "link-icon", PRIORITY_SMALL_ICON)
    collector.add("https://acme.com/logo.png", "image", "img-logo-class", PRIORITY_LOGO_IMAGE)
    collector.add("/logo.png", "image", "link-icon", PRIORITY_SMALL_ICON)

    assert len(collector.candidates) == 1
    candidate = collector.candidates["https://acme.com/logo.png"]
    assert candidate.priority == PRIORITY_LOGO_IMAGE
    assert candidate.context == "img-logo-class"


def test_og_image_does_not_replace_a_collected_icon():
    html = """
    <head>
      <link rel="icon" href="/brand.png">
      <meta property="og:image" content="https://acme.com/brand.png">
    </head>
    <body><img class="logo" src="/logo.svg"></body>
    """
    logos = _logos(html)

    assert [logo.url for logo in logos] == ["https://acme.com/logo.svg", "https://acme.com/brand.png"]
    # the icon entry survives the og:image with the same URL
    assert logos[1].variant == LogoVariant.ICON


def test_reversed_variant_from_url():
    html = """
    <img class="logo" src="/logo.png">
    <img class="logo" src="/logo-white.png">
    <img class="logo" src="/logo-dark.png">
    """
    logos = _logos(html)

    assert [l.variant for l in logos] == [LogoVariant.PRIMARY, LogoVariant.REVERSED, LogoVariant.STACKED]


def test_at_most_five_logos():
    html = "".join(f'<img class="logo" src="/logo-{i}.png">' for i in range(8))
    assert len(_logos(html)) == 5
