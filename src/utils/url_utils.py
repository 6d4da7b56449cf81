"""URL 정규화 유틸리티"""

from urllib.parse import urljoin, urlparse

SITE_ORIGIN = "https://www.akc.org"


def normalize_href(href: str, base_url: str = SITE_ORIGIN) -> str:
    """상대/프로토콜-상대 href를 절대 URL로 정규화합니다.

    - "//host/path" -> "https://host/path"
    - "/path", "path", "../path" -> base_url 기준 절대 URL
    - 스킴이 있는 값(http(s)://, data: 등) -> 그대로

    Examples:
        >>> normalize_href("/dog-breeds/beagle/")
        'https://www.akc.org/dog-breeds/beagle/'
        >>> normalize_href("wp-content/x.jpg")
        'https://www.akc.org/wp-content/x.jpg'
        >>> normalize_href("")
        ''
    """
    if not href:
        return ""

    h = href.strip()
    if not h:
        return ""

    if h.startswith("//"):
        return f"https:{h}"

    if urlparse(h).scheme:
        return h

    return urljoin(f"{base_url.rstrip('/')}/", h)
