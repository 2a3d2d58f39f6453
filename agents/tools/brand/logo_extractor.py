"""Logo candidate detection and ranking."""

import json
import re
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import quote, urlparse

from bs4 import BeautifulSoup, Tag

from agents.config import LOGO_OUTPUT_LIMIT
from agents.domain.models import LogoCandidate, LogoData, LogoVariant
from utils.url_utils import resolve_url
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

# Fixed score per detection source
PRIORITY_LOGO_IMAGE = 10
PRIORITY_INLINE_SVG = 9
PRIORITY_HEADER_IMAGE = 8
PRIORITY_JSON_LD = 7
PRIORITY_LARGE_ICON = 6
PRIORITY_OG_IMAGE = 4
PRIORITY_SMALL_ICON = 3

LARGE_ICON_SIZES = ('192', '180', '152')

HEADER_IMAGE_SELECTOR = (
    'header img, nav img, [class*="header"] img, [id*="header"] img, '
    '[class*="nav"] img, [id*="nav"] img'
)

_LEADING_INT = re.compile(r'\s*(\d+)')


def _attr_text(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if isinstance(value, list):
        return ' '.join(value)
    return value or ''


def _has_logo_hint(tag: Tag, attrs) -> bool:
    return any('logo' in _attr_text(tag, attr).lower() for attr in attrs)


def _parse_dimension(value: Any) -> Optional[int]:
    match = _LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return None
    number = int(match.group(1))
    return number or None


def _is_http_url(url: str) -> bool:
    return urlparse(url).scheme in ('http', 'https')


def svg_data_uri(svg: Tag) -> str:
    return 'data:image/svg+xml,' + quote(str(svg), safe="-_.!~*'()")


def logo_format(candidate: LogoCandidate) -> str:
    if candidate.type == 'svg':
        return 'svg'
    path = urlparse(candidate.url).path.lower()
    if path.endswith('.svg'):
        return 'svg'
    if path.endswith('.png'):
        return 'png'
    if path.endswith(('.jpg', '.jpeg')):
        return 'jpg'
    if path.endswith('.webp'):
        return 'webp'
    return 'png'


def logo_variant(index: int, candidate: LogoCandidate) -> LogoVariant:
    if index == 0:
        return LogoVariant.PRIMARY
    if 'icon' in candidate.context:
        return LogoVariant.ICON
    url = candidate.url.lower()
    if 'white' in url or 'light' in url:
        return LogoVariant.REVERSED
    return LogoVariant.STACKED


def _json_ld_image_refs(value: Any) -> Iterator[str]:
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        url = value.get('url') or value.get('contentUrl')
        if isinstance(url, str):
            yield url
    elif isinstance(value, list):
        for item in value:
            yield from _json_ld_image_refs(item)


def _json_ld_logo_refs(data: Any) -> Iterator[str]:
    """`logo`/`image` references of a JSON-LD document, including @graph nodes."""
    if isinstance(data, list):
        for item in data:
            yield from _json_ld_logo_refs(item)
    elif isinstance(data, dict):
        if '@graph' in data:
            yield from _json_ld_logo_refs(data['@graph'])
        for key in ('logo', 'image'):
            if key in data:
                yield from _json_ld_image_refs(data[key])


class LogoCollector:
    """Candidates keyed by absolute URL; a repeat keeps the higher priority.

    With `keep_existing` a URL that is already collected is left alone whatever
    its priority.
    """

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        self.candidates: Dict[str, LogoCandidate] = {}

    def add(self, url: str, type: str, context: str, priority: int,
            alt: Optional[str] = None, width: Any = None, height: Any = None,
            resolve: bool = True, keep_existing: bool = False) -> None:
        url = (url or '').strip()
        if not url:
            return
        if resolve:
            url = resolve_url(self.base_url, url)
        existing = self.candidates.get(url)
        if existing is not None and (keep_existing or existing.priority >= priority):
            return
        self.candidates[url] = LogoCandidate(
            url=url,
            type=type,
            context=context,
            priority=priority,
            alt=alt or None,
            width=_parse_dimension(width),
            height=_parse_dimension(height),
        )

    def ranked(self) -> List[LogoCandidate]:
        return sorted(self.candidates.values(), key=lambda c: c.priority, reverse=True)


def _collect_logo_images(soup: BeautifulSoup, collector: LogoCollector) -> None:
    for img in soup.find_all('img'):
        if _has_logo_hint(img, ('class', 'id', 'alt', 'src')):
            collector.add(img.get('src', ''), 'image', 'img-logo-class', PRIORITY_LOGO_IMAGE,
                          alt=img.get('alt'), width=img.get('width'), height=img.get('height'))


def _collect_header_images(soup: BeautifulSoup, collector: LogoCollector) -> None:
    for img in soup.select(HEADER_IMAGE_SELECTOR):
        collector.add(img.get('src', ''), 'image', 'header-img', PRIORITY_HEADER_IMAGE,
                      alt=img.get('alt'), width=img.get('width'), height=img.get('height'))


def _collect_inline_svgs(soup: BeautifulSoup, collector: LogoCollector) -> None:
    for svg in soup.find_all('svg'):
        if _has_logo_hint(svg, ('class', 'id', 'aria-label')):
            collector.add(svg_data_uri(svg), 'svg', 'inline-svg-logo', PRIORITY_INLINE_SVG,
                          alt=svg.get('aria-label'), width=svg.get('width'), height=svg.get('height'),
                          resolve=False)


def _collect_icon_links(soup: BeautifulSoup, collector: LogoCollector) -> None:
    for link in soup.select('link[rel*="icon"]'):
        sizes = _attr_text(link, 'sizes')
        large = any(size in sizes for size in LARGE_ICON_SIZES)
        collector.add(link.get('href', ''), 'image', 'link-icon',
                      PRIORITY_LARGE_ICON if large else PRIORITY_SMALL_ICON)


def _collect_og_image(soup: BeautifulSoup, collector: LogoCollector) -> None:
    meta = soup.select_one('meta[property="og:image"]')
    if meta:
        collector.add(meta.get('content', ''), 'image', 'og-image', PRIORITY_OG_IMAGE,
                      keep_existing=True)


def _collect_json_ld(soup: BeautifulSoup, collector: LogoCollector) -> None:
    for script in soup.select('script[type="application/ld+json"]'):
        try:
            data = json.loads(script.get_text())
        except ValueError as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue
        for ref in _json_ld_logo_refs(data):
            url = resolve_url(collector.base_url, ref)
            if _is_http_url(url):
                collector.add(url, 'image', 'json-ld', PRIORITY_JSON_LD, resolve=False)


def extract_logos(soup: BeautifulSoup, base_url: str) -> List[LogoData]:
    """Score logo candidates from six sources and return the best few."""
    collector = LogoCollector(base_url)
    _collect_logo_images(soup, collector)
    _collect_header_images(soup, collector)
    _collect_inline_svgs(soup, collector)
    _collect_icon_links(soup, collector)
    _collect_og_image(soup, collector)
    _collect_json_ld(soup, collector)

    logos = []
    for index, candidate in enumerate(collector.ranked()[:LOGO_OUTPUT_LIMIT]):
        logos.append(LogoData(
            url=candidate.url,
            format=logo_format(candidate),
            variant=logo_variant(index, candidate),
            width=candidate.width,
            height=candidate.height,
            alt=candidate.alt,
        ))

    logger.info(f"Extracted {len(logos)} logos from {len(collector.candidates)} candidates")
    return logos
