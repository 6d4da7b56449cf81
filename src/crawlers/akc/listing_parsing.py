"""AKC 견종 목록 페이지 - HTML 파싱 유틸.

이 모듈은 네트워크(fetch)와 분리된 순수 파싱 로직을 담습니다.
"""

from __future__ import annotations

from typing import List, Optional

from selectolax.lexbor import LexborHTMLParser, LexborNode

from src.schemas.breed_schema import BreedRecord
from src.utils.url_utils import SITE_ORIGIN, normalize_href


# 카드 선택자: 부분 일치로 기본 클래스와 변형 클래스(--featured 등)를 모두 포함
_CARD_SELECTOR = '[class*="breed-type-card"]'
# 우선 선택자 → 대체 선택자 순으로 시도
_TITLE_SELECTORS = (".breed-type-card__title", "h3")
_TEASER_SELECTORS = (".breed-type-card__content p", "p")
_DETAIL_LINK_SELECTOR = 'a[href*="/dog-breeds/"]'


def _first_match(node: LexborNode, selectors: tuple) -> Optional[LexborNode]:
    for selector in selectors:
        found = node.css_first(selector)
        if found is not None:
            return found
    return None


def _node_text(node: Optional[LexborNode]) -> str:
    if node is None:
        return ""
    return (node.text(deep=True) or "").strip()


def _attr(node: Optional[LexborNode], name: str) -> str:
    if node is None:
        return ""
    return (node.attributes.get(name) or "").strip()


def parse_breed_card(card: LexborNode, origin: str = SITE_ORIGIN) -> Optional[BreedRecord]:
    """카드 하나에서 견종 후보 추출. 이름이나 링크가 없으면 None."""
    name = _node_text(_first_match(card, _TITLE_SELECTORS))

    link_node = card.css_first(_DETAIL_LINK_SELECTOR)
    detail_link = normalize_href(_attr(link_node, "href"), base_url=origin)

    if not name or not detail_link:
        return None

    # lazy-load 속성 우선, 없으면 src
    img = card.css_first("img")
    image_url = _attr(img, "data-src") or _attr(img, "src")
    image_url = normalize_href(image_url, base_url=origin)

    description = _node_text(_first_match(card, _TEASER_SELECTORS))

    return BreedRecord(
        name=name,
        detail_link=detail_link,
        image_url=image_url,
        description=description,
    )


def parse_breed_summaries(html: str, origin: str = SITE_ORIGIN) -> List[BreedRecord]:
    """목록 페이지 HTML에서 견종 후보를 문서 순서대로 반환.

    매칭되는 카드가 없으면 빈 리스트를 반환합니다 (예외 없음).
    중복 제거는 크롤러의 병합 단계에서 처리합니다.
    """
    if not html or not html.strip():
        return []

    parser = LexborHTMLParser(html)
    breeds: List[BreedRecord] = []
    for card in parser.css(_CARD_SELECTOR):
        breed = parse_breed_card(card, origin=origin)
        if breed is not None:
            breeds.append(breed)
    return breeds
