"""
Tests for page copy extraction and the prompt summary.
"""

from bs4 import BeautifulSoup

from agents.domain.models import ExtractedContent
from agents.tools.brand.content_extractor import extract_content, generate_content_summary

PAGE = """
<html>
<head>
  <title>Acme | Rockets for everyone</title>
  <meta name="description" content="Acme builds reliable rockets.">
  <meta name="keywords" content="rockets, space,  launch ,">
</head>
<body>
  <section class="hero">
    <h1>Welcome   to
      Acme</h1>
    <p>Reach orbit on your schedule.</p>
    <a class="btn" href="/start">Get started</a>
  </section>
  <h2>Why Acme</h2>
  <h3>Why Acme</h3>
  <div class="feature-card"><h3>Reusable</h3><p>Fly the same booster again and again.</p></div>
  <ul>
    <li>Launch windows every single week of the year</li>
    <li>short</li>
  </ul>
  <p>We have been building launch vehicles for more than thirty years and every one has flown.</p>
  <blockquote><p>Acme got our satellite to orbit on time and on budget. Amazing team.</p></blockquote>
  <div class="about-section"><p>Founded in 1990 in the desert.</p></div>
  <footer>
    <a href="mailto:hello@acme.com?subject=Hi">Email us</a>
    <a href="tel:+1-555-0100">Call</a>
    <a href="https://twitter.com/acme">Twitter</a>
    <a href="https://www.linkedin.com/company/acme">LinkedIn</a>
    <address>1 Rocket Road,
      Mojave, CA</address>
    <p>Press: press@acme.com</p>
  </footer>
</body>
</html>
"""


def _content() -> ExtractedContent:
    return extract_content(BeautifulSoup(PAGE, "html.parser"))


def test_title_description_and_hero():
    content = _content()

    assert content.title == "Acme | Rockets for everyone"
    assert content.description == "Acme builds reliable rockets."
    assert content.hero_heading == "Welcome to Acme"
    assert content.hero_subtext == "Reach orbit on your schedule."


def test_title_falls_back_to_og_title_then_h1():
    og = extract_content(BeautifulSoup('<meta property="og:title" content="OG Acme"><h1>Heading</h1>', "html.parser"))
    assert og.title == "OG Acme"

    h1 = extract_content(BeautifulSoup("<h1>Heading</h1>", "html.parser"))
    assert h1.title == "Heading"


def test_headings_are_unique():
    content = _content()
    assert content.headings.count("Why Acme") == 1
    assert "Welcome to Acme" in content.headings


def test_long_paragraphs_only():
    content = _content()
    assert content.paragraphs == [
        "We have been building launch vehicles for more than thirty years and every one has flown.",
        "Acme got our satellite to orbit on time and on budget. Amazing team.",
    ]


def test_value_props_testimonials_and_ctas():
    content = _content()

    assert "Reusable: Fly the same booster again and again." in content.value_props
    assert "Launch windows every single week of the year" in content.value_props
    assert "short" not in content.value_props
    assert content.testimonials == ["Acme got our satellite to orbit on time and on budget. Amazing team."]
    assert "Get started" in content.ctas


def test_keywords_social_and_contacts():
    content = _content()

    assert content.keywords == ["rockets", "space", "launch"]
    assert content.social_links == ["https://twitter.com/acme", "https://www.linkedin.com/company/acme"]
    assert content.contact_info.email == ["hello@acme.com", "press@acme.com"]
    assert content.contact_info.phone == ["+1-555-0100"]
    assert content.contact_info.address == "1 Rocket Road, Mojave, CA"
    assert content.about_text == "Founded in 1990 in the desert."


def test_empty_page():
    content = extract_content(BeautifulSoup("", "html.parser"))

    assert content.title == ""
    assert content.headings == []
    assert content.contact_info.address is None
    assert generate_content_summary(content) == ""


def test_content_summary_sections():
    summary = generate_content_summary(_content())

    assert summary.startswith("Title: Acme | Rockets for everyone")
    assert "Main Heading: Welcome to Acme" in summary
    assert "Subheading: Reach orbit on your schedule." in summary
    assert "- Reusable: Fly the same booster again and again." in summary
    assert "About: Founded in 1990 in the desert." in summary
    assert "Call-to-Actions: Get started" in summary


def test_to_dict_round_trip_keys():
    data = _content().to_dict()

    assert data["heroHeading"] == "Welcome to Acme"
    assert data["contactInfo"]["address"] == "1 Rocket Road, Mojave, CA"
    assert ExtractedContent.from_dict(data) == _content()
