"""URL validation and normalization helpers."""

from urllib.parse import urljoin, urlparse

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.webp', '.svg', '.ico')


def normalize_url(url: str) -> str:
    """Trim, default to https://, drop one trailing slash."""
    url = (url or '').strip()
    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url
    if url.endswith('/'):
        url = url[:-1]
    return url


def is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(normalize_url(url))
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.hostname)


def get_domain(url: str) -> str:
    try:
        return urlparse(normalize_url(url)).hostname or url
    except ValueError:
        return url


def get_brand_name_from_url(url: str) -> str:
    """example.com -> Example, www.acme.co.uk -> Acme"""
    domain = get_domain(url)
    if domain.startswith('www.'):
        domain = domain[4:]
    label = domain.split('.')[0]
    return label[:1].upper() + label[1:]


def resolve_url(base_url: str, ref: str) -> str:
    """Resolve `ref` against the page URL; unparseable refs come back as-is."""
    base = base_url if base_url.startswith(('http://', 'https://')) else normalize_url(base_url)
    try:
        return urljoin(base, ref.strip())
    except ValueError:
        return ref


def is_image_url(url: str) -> bool:
    lowered = url.lower()
    return any(ext in lowered for ext in IMAGE_EXTENSIONS)
