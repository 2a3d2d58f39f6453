"""Copy and messaging extraction for the generation prompts."""

import re
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

from agents.domain.models import ContactInfo, ExtractedContent

EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')

SOCIAL_LINK_SELECTOR = (
    'a[href*="facebook"], a[href*="twitter"], a[href*="linkedin"], '
    'a[href*="instagram"], a[href*="youtube"]'
)
VALUE_PROP_SELECTOR = '[class*="feature"], [class*="benefit"], [class*="value"], [class*="card"]'
TESTIMONIAL_SELECTOR = 'blockquote, [class*="testimonial"], [class*="quote"], [class*="review"]'
CTA_SELECTOR = 'a.btn, a.button, button, [class*="cta"], [class*="btn"]'
ABOUT_SELECTOR = '[class*="about"] p, #about p, .about-us p'

MAX_HEADINGS = 20
MAX_PARAGRAPHS = 15
MAX_VALUE_PROPS = 10
MAX_TESTIMONIALS = 5
MAX_CTAS = 10
MAX_CONTACTS = 3
MAX_ABOUT_CHARS = 1000


def _text(element: Optional[Tag]) -> str:
    """Visible text with whitespace collapsed."""
    if element is None:
        return ''
    return ' '.join(element.get_text(' ').split())


def _first_text(soup: BeautifulSoup, selector: str) -> str:
    return _text(soup.select_one(selector))


def _meta(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    return (tag.get('content') or '').strip() if tag else ''


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def _extract_value_props(soup: BeautifulSoup) -> List[str]:
    props = []
    for card in soup.select(VALUE_PROP_SELECTOR):
        heading = _text(card.find(['h2', 'h3', 'h4']))
        desc = _text(card.find('p'))
        if heading and desc:
            props.append(f"{heading}: {desc}")

    for item in soup.select('ul li, ol li'):
        text = _text(item)
        if 20 < len(text) < 200 and text not in props:
            if text[0].isupper() or item.find(['strong', 'b']):
                props.append(text)
    return _unique(props)[:MAX_VALUE_PROPS]


def _extract_testimonials(soup: BeautifulSoup) -> List[str]:
    quotes = []
    for block in soup.select(TESTIMONIAL_SELECTOR):
        text = ' '.join(_text(p) for p in block.find_all('p')).strip() or _text(block)
        if 30 < len(text) < 500:
            quotes.append(text)
    return _unique(quotes)[:MAX_TESTIMONIALS]


def extract_emails(soup: BeautifulSoup) -> List[str]:
    emails = []
    for link in soup.select('a[href^="mailto:"]'):
        email = link.get('href', '').replace('mailto:', '', 1).split('?')[0].strip()
        if email:
            emails.append(email)
    body = soup.body or soup
    emails.extend(EMAIL_PATTERN.findall(body.get_text(' ')))
    return _unique(emails)[:MAX_CONTACTS]


def extract_phones(soup: BeautifulSoup) -> List[str]:
    phones = []
    for link in soup.select('a[href^="tel:"]'):
        phone = link.get('href', '').replace('tel:', '', 1).strip()
        if phone:
            phones.append(phone)
    return _unique(phones)[:MAX_CONTACTS]


def extract_address(soup: BeautifulSoup) -> Optional[str]:
    address = _first_text(soup, 'address') or _first_text(soup, '[itemprop="address"]')
    if address:
        return address
    address = _first_text(soup, '[class*="address"]')
    if address and len(address) < 200:
        return address
    return None


def extract_content(soup: BeautifulSoup) -> ExtractedContent:
    """Pull the page's copy into the categories the prompts consume."""
    title_tag = soup.select_one('head > title') or soup.find('title')
    title = (
        _text(title_tag)
        or _meta(soup, 'meta[property="og:title"]')
        or _first_text(soup, 'h1')
    )
    description = (
        _meta(soup, 'meta[name="description"]')
        or _meta(soup, 'meta[property="og:description"]')
    )

    hero_heading = _first_text(soup, 'h1') or _first_text(soup, 'main h1, .hero h1, [class*="hero"] h1')
    hero_subtext = (
        _first_text(soup, 'h1 + p, .hero p, [class*="hero"] p')
        or _first_text(soup, 'main > p')
    )

    headings = [t for t in (_text(h) for h in soup.find_all(['h1', 'h2', 'h3'])) if 3 < len(t) < 200]
    paragraphs = [t for t in (_text(p) for p in soup.find_all('p')) if 50 < len(t) < 1000]

    ctas = [t for t in (_text(el) for el in soup.select(CTA_SELECTOR)) if 2 < len(t) < 50]

    keywords = [k.strip() for k in _meta(soup, 'meta[name="keywords"]').split(',') if k.strip()]

    social_links = _unique(
        link.get('href') for link in soup.select(SOCIAL_LINK_SELECTOR) if link.get('href')
    )

    about_text = ' '.join(_text(p) for p in soup.select(ABOUT_SELECTOR))[:MAX_ABOUT_CHARS]

    return ExtractedContent(
        title=title,
        description=description,
        hero_heading=hero_heading,
        hero_subtext=hero_subtext,
        headings=_unique(headings)[:MAX_HEADINGS],
        paragraphs=paragraphs[:MAX_PARAGRAPHS],
        value_props=_extract_value_props(soup),
        testimonials=_extract_testimonials(soup),
        ctas=_unique(ctas)[:MAX_CTAS],
        keywords=keywords,
        social_links=social_links,
        contact_info=ContactInfo(
            email=extract_emails(soup),
            phone=extract_phones(soup),
            address=extract_address(soup),
        ),
        about_text=about_text,
    )


def generate_content_summary(content: ExtractedContent) -> str:
    """Flatten extracted content into the plain-text block used in prompts."""
    parts = []
    if content.title:
        parts.append(f"Title: {content.title}")
    if content.description:
        parts.append(f"Description: {content.description}")
    if content.hero_heading:
        parts.append(f"Main Heading: {content.hero_heading}")
    if content.hero_subtext:
        parts.append(f"Subheading: {content.hero_subtext}")
    if content.headings:
        parts.append(f"Key Sections: {', '.join(content.headings[:10])}")
    if content.value_props:
        props = '\n'.join(f"- {v}" for v in content.value_props[:5])
        parts.append(f"Value Propositions:\n{props}")
    if content.paragraphs:
        parts.append("Key Content:\n" + '\n\n'.join(content.paragraphs[:5]))
    if content.about_text:
        parts.append(f"About: {content.about_text}")
    if content.ctas:
        parts.append(f"Call-to-Actions: {', '.join(content.ctas[:5])}")
    return '\n\n'.join(parts)
