"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 문자열/dict)
- 크롤러/네트워크 의존 없음
"""

from .listing_pages import CLASSIC_LISTING_HTML, EMPTY_LISTING_HTML, FEATURED_LISTING_HTML
from .detail_pages import BEAGLE_FULL_DESCRIPTION, BEAGLE_PROPS, MULTI_KEY_PROPS

__all__ = [
    "CLASSIC_LISTING_HTML",
    "FEATURED_LISTING_HTML",
    "EMPTY_LISTING_HTML",
    "BEAGLE_PROPS",
    "BEAGLE_FULL_DESCRIPTION",
    "MULTI_KEY_PROPS",
]
