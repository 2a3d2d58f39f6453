"""
Website brand analysis pipeline.

Fetches a page once, runs the color, font, logo and content engines over the
same parsed document and compiles an AnalysisResult. Progress is reported
through an optional callback at six checkpoints.
"""

import re
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from agents.domain.models import AnalysisProgress, AnalysisResult, ExtractedContent
from agents.tools.brand.page_fetcher import fetch_page
from agents.tools.brand.color_extractor import extract_colors
from agents.tools.brand.font_extractor import extract_fonts
from agents.tools.brand.logo_extractor import extract_logos
from agents.tools.brand.content_extractor import extract_content
from utils.url_utils import get_brand_name_from_url
from setup_logging_optimized import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[AnalysisProgress], None]

TOTAL_STEPS = 6
MIN_INDUSTRY_SCORE = 3
TAGLINE_MAX_CHARS = 100

INDUSTRY_KEYWORDS: Dict[str, List[str]] = {
    'Technology / Software': ['software', 'saas', 'platform', 'api', 'developer', 'code', 'tech', 'digital', 'cloud', 'app'],
    'Finance / Fintech': ['finance', 'banking', 'payment', 'credit', 'loan', 'investment', 'money', 'fintech', 'financial'],
    'E-commerce / Retail': ['shop', 'store', 'buy', 'cart', 'product', 'retail', 'commerce', 'marketplace'],
    'Healthcare': ['health', 'medical', 'patient', 'care', 'hospital', 'clinic', 'wellness', 'healthcare'],
    'Education': ['learn', 'education', 'course', 'student', 'training', 'school', 'university', 'teaching'],
    'Real Estate': ['property', 'real estate', 'home', 'house', 'apartment', 'rent', 'mortgage'],
    'Marketing / Advertising': ['marketing', 'advertising', 'brand', 'campaign', 'seo', 'content', 'social media'],
    'Travel / Hospitality': ['travel', 'hotel', 'booking', 'flight', 'vacation', 'tourism', 'hospitality'],
    'Food / Restaurant': ['food', 'restaurant', 'menu', 'dining', 'delivery', 'cuisine', 'chef'],
    'Entertainment / Media': ['entertainment', 'media', 'video', 'music', 'streaming', 'content', 'creative'],
    'Professional Services': ['consulting', 'legal', 'accounting', 'professional', 'service', 'agency'],
    'Manufacturing': ['manufacturing', 'industrial', 'factory', 'production', 'supply chain'],
}


def derive_brand_name(title: str, url: str) -> str:
    """Leading segment of the page title, else a name derived from the domain."""
    if title:
        name = title.split('|')[0].split('-')[0].split('–')[0].strip()
        if name:
            return name
    return get_brand_name_from_url(url)


def derive_tagline(content: ExtractedContent) -> Optional[str]:
    if content.hero_subtext:
        return content.hero_subtext
    if content.description:
        return content.description[:TAGLINE_MAX_CHARS]
    return None


def detect_industry(content: ExtractedContent) -> Optional[str]:
    """Best keyword-scored industry, or None when nothing scores at least 3."""
    text = ' '.join(filter(None, [
        content.title,
        content.description,
        content.hero_heading,
        content.hero_subtext,
        *content.headings,
        *content.paragraphs,
        *content.value_props,
        content.about_text,
    ])).lower()

    best_industry, best_score = None, 0
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        score = sum(len(re.findall(re.escape(keyword), text)) for keyword in keywords)
        if score > best_score:
            best_industry, best_score = industry, score

    if best_score >= MIN_INDUSTRY_SCORE:
        return best_industry
    return None


def _report(on_progress: Optional[ProgressCallback], step: int, message: str) -> None:
    if on_progress is None:
        return
    progress = AnalysisProgress(
        step=step,
        total_steps=TOTAL_STEPS,
        message=message,
        percentage=round(step / TOTAL_STEPS * 100),
    )
    try:
        on_progress(progress)
    except Exception as e:
        logger.warning(f"Progress callback failed at step {step}: {e}")


async def analyze_website(url: str, on_progress: Optional[ProgressCallback] = None) -> AnalysisResult:
    """Analyze a website and extract its brand identity.

    Args:
        url: Normalized absolute http(s) URL.
        on_progress: Optional callback receiving AnalysisProgress at each step.

    Raises:
        FetchError: The page itself could not be retrieved.
    """
    _report(on_progress, 1, 'Fetching website content...')
    page = await fetch_page(url)

    _report(on_progress, 2, 'Analyzing color palette...')
    colors = extract_colors(page.soup, page.styles)

    _report(on_progress, 3, 'Detecting typography...')
    fonts = extract_fonts(page.soup, page.styles)

    _report(on_progress, 4, 'Finding logos and brand assets...')
    logos = extract_logos(page.soup, url)

    _report(on_progress, 5, 'Extracting content and messaging...')
    content = extract_content(page.soup)

    _report(on_progress, 6, 'Compiling analysis results...')
    result = AnalysisResult(
        id=uuid.uuid4().hex,
        url=url,
        brand_name=derive_brand_name(content.title, url),
        tagline=derive_tagline(content),
        industry=detect_industry(content),
        colors=colors,
        fonts=fonts,
        logos=logos,
        content=content,
        analyzed_at=datetime.now(timezone.utc),
    )

    logger.info(
        f"Analyzed {url}: brand={result.brand_name!r} colors={len(colors)} "
        f"fonts={len(fonts)} logos={len(logos)} industry={result.industry}"
    )
    return result
