"""Fetches a page plus its linked stylesheets and parses it for the extractors."""

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

import aiohttp
from bs4 import BeautifulSoup

from agents.config import (
    MAX_STYLESHEETS,
    PAGE_FETCH_TIMEOUT,
    STYLESHEET_FETCH_TIMEOUT,
    BROWSER_USER_AGENT,
    BROWSER_ACCEPT,
    BROWSER_ACCEPT_LANGUAGE,
)
from agents.exceptions import FetchError
from utils.url_utils import resolve_url
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

BROWSER_HEADERS = {
    'User-Agent': BROWSER_USER_AGENT,
    'Accept': BROWSER_ACCEPT,
    'Accept-Language': BROWSER_ACCEPT_LANGUAGE,
}


@dataclass
class FetchedPage:
    url: str
    html: str
    soup: BeautifulSoup
    title: str = ""
    meta_description: str = ""
    styles: List[str] = field(default_factory=list)
    scripts: List[str] = field(default_factory=list)


def _meta_content(soup: BeautifulSoup, selector: str) -> str:
    tag = soup.select_one(selector)
    return (tag.get('content') or '').strip() if tag else ''


def parse_page(url: str, html: str) -> FetchedPage:
    """Parse HTML and collect everything that does not need the network."""
    soup = BeautifulSoup(html, 'html.parser')

    title_tag = soup.select_one('head > title') or soup.find('title')
    title = title_tag.get_text(strip=True) if title_tag else ''
    if not title:
        title = _meta_content(soup, 'meta[property="og:title"]')

    meta_description = (
        _meta_content(soup, 'meta[name="description"]')
        or _meta_content(soup, 'meta[property="og:description"]')
    )

    styles = [tag.get_text() for tag in soup.find_all('style') if tag.get_text().strip()]
    scripts = [tag.get_text() for tag in soup.select('script:not([src])') if tag.get_text().strip()]

    return FetchedPage(
        url=url,
        html=html,
        soup=soup,
        title=title,
        meta_description=meta_description,
        styles=styles,
        scripts=scripts,
    )


def stylesheet_urls(page: FetchedPage, limit: int = MAX_STYLESHEETS) -> List[str]:
    """Absolute URLs of the first `limit` linked stylesheets, in document order."""
    urls: List[str] = []
    for link in page.soup.select('link[rel~="stylesheet"][href]'):
        href = (link.get('href') or '').strip()
        if href:
            urls.append(resolve_url(page.url, href))
        if len(urls) >= limit:
            break
    return urls


class PageFetcher:
    """Fetches pages with browser-like headers over one aiohttp session."""

    def __init__(
        self,
        page_timeout: float = PAGE_FETCH_TIMEOUT,
        stylesheet_timeout: float = STYLESHEET_FETCH_TIMEOUT,
        max_stylesheets: int = MAX_STYLESHEETS,
    ) -> None:
        self.page_timeout = page_timeout
        self.stylesheet_timeout = stylesheet_timeout
        self.max_stylesheets = max_stylesheets
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> 'PageFetcher':
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=BROWSER_HEADERS)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch_page(self, url: str) -> FetchedPage:
        """Fetch and parse `url`, then append the CSS of its linked stylesheets.

        Raises FetchError when the page itself cannot be retrieved. A failing
        stylesheet is skipped and never aborts the fetch.
        """
        session = await self._get_session()
        logger.info(f"Fetching {url}")
        try:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=self.page_timeout)) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(
                        url,
                        f"Failed to fetch {url}: {resp.status} {resp.reason or ''}".strip(),
                        status=resp.status,
                    )
                html = await resp.text(errors="ignore")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(url, f"Failed to fetch {url}: {e or type(e).__name__}", cause=e) from e

        page = parse_page(url, html)

        css_urls = stylesheet_urls(page, self.max_stylesheets)
        if css_urls:
            results = await asyncio.gather(*(self._fetch_stylesheet(session, css_url) for css_url in css_urls))
            fetched = [css for css in results if css is not None]
            page.styles.extend(fetched)
            logger.info(f"Fetched {len(fetched)}/{len(css_urls)} stylesheets for {url}")

        return page

    async def _fetch_stylesheet(self, session: aiohttp.ClientSession, url: str) -> Optional[str]:
        """Best-effort stylesheet download; None on any network or HTTP failure."""
        try:
            async with session.get(url, timeout=aiohttp.ClientTimeout(total=self.stylesheet_timeout)) as resp:
                if not 200 <= resp.status < 300:
                    logger.debug(f"Skipping stylesheet {url}: HTTP {resp.status}")
                    return None
                return await resp.text(errors="ignore")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Skipping stylesheet {url}: {e or type(e).__name__}")
            return None


async def fetch_page(url: str) -> FetchedPage:
    """Fetch one page with a short-lived session."""
    async with PageFetcher() as fetcher:
        return await fetcher.fetch_page(url)
