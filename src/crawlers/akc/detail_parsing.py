"""AKC 견종 상세 페이지 - 임베디드 JSON 파싱.

상세 페이지에는 ``[data-js-component="breedPage"]`` 요소의 ``data-js-props``
속성에 HTML-escape된 JSON 설정이 들어 있습니다. 구조:

    settings.breed_data.description.<breed_key>.akc_org_blurb  (짧은 소개)
    settings.breed_data.description.<breed_key>.akc_org_about  (긴 소개)
"""

from __future__ import annotations

import json
from typing import Any, Optional

from selectolax.lexbor import LexborHTMLParser

from src.core.logging import logger
from src.utils.text.cleaning import clean_markup_text


_BREED_PAGE_SELECTOR = '[data-js-component="breedPage"]'
_PROPS_ATTRIBUTE = "data-js-props"

# 속성 원문에서 JSON 파싱 전에 푸는 entity (정확히 4개, 순서 고정)
_ATTRIBUTE_ENTITIES = (
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
)

_DESCRIPTION_PATH = ("settings", "breed_data", "description")
_BLURB_FIELD = "akc_org_blurb"
_ABOUT_FIELD = "akc_org_about"


def decode_attribute_entities(raw: str) -> str:
    """속성 원문의 &quot; &amp; &lt; &gt; 만 디코딩합니다."""
    if not raw:
        return ""
    for entity, replacement in _ATTRIBUTE_ENTITIES:
        raw = raw.replace(entity, replacement)
    return raw


def extract_breed_props(html: str) -> Optional[str]:
    """breedPage 요소의 data-js-props 원문. 요소/속성이 없으면 None."""
    if not html:
        return None
    node = LexborHTMLParser(html).css_first(_BREED_PAGE_SELECTOR)
    if node is None:
        return None
    raw = node.attributes.get(_PROPS_ATTRIBUTE)
    return raw or None


def find_breed_description_entry(data: Any) -> Optional[dict]:
    """settings.breed_data.description 맵의 첫 번째 항목.

    페이지당 견종 1개라는 가정. 키가 여러 개면 첫 번째 키를 그대로 씁니다.
    """
    current = data
    for key in _DESCRIPTION_PATH:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    if not isinstance(current, dict) or not current:
        return None

    first_key = next(iter(current))
    entry = current[first_key]
    return entry if isinstance(entry, dict) else None


def _text_field(entry: dict, field: str) -> str:
    value = entry.get(field)
    return value if isinstance(value, str) else ""


def extract_full_description(html: str) -> Optional[str]:
    """상세 페이지에서 blurb + about을 합친 긴 설명 추출.

    Returns:
        "<blurb>\\n\\n<about>" (빈 쪽은 생략), 둘 다 비면 None.
        JSON 파싱 실패 등 모든 실패는 None으로 흡수합니다.
    """
    raw = extract_breed_props(html)
    if raw is None:
        return None

    try:
        data = json.loads(decode_attribute_entities(raw))
    except json.JSONDecodeError as e:
        logger.debug(f"[DETAIL] data-js-props is not valid JSON: {e}")
        return None

    entry = find_breed_description_entry(data)
    if entry is None:
        return None

    blurb = clean_markup_text(_text_field(entry, _BLURB_FIELD))
    about = clean_markup_text(_text_field(entry, _ABOUT_FIELD))

    combined = "\n\n".join(text for text in (blurb, about) if text)
    return combined or None
