"""Text cleaning helpers."""

from __future__ import annotations

import re


# 비중첩 태그 패턴: 상세 설명에 쓰이는 단순 인라인 마크업(<p>, <em>, <a ...>) 전용
_TAG_PATTERN = re.compile(r"<[^>]*>")

# 태그 제거 후 추가로 풀어주는 named entity (순서 고정)
_EXTRA_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#x27;", "'"),
)


def strip_markup_tags(text: str) -> str:
    """'<...>' 형태를 모두 제거합니다. 범용 HTML 파서가 아닙니다.

    예시:
    - "<p>Loyal <em>and</em> merry</p>" -> "Loyal and merry"
    """
    if not text:
        return ""
    return _TAG_PATTERN.sub("", text)


def unescape_extra_entities(text: str) -> str:
    if not text:
        return ""
    for entity, replacement in _EXTRA_ENTITIES:
        text = text.replace(entity, replacement)
    return text


def clean_markup_text(text: str) -> str:
    """태그 제거 → entity 치환 → 양끝 공백 제거.

    Args:
        text: 상세 설명 원문 (단순 인라인 마크업 포함 가능)

    Returns:
        정제된 텍스트 (비어 있으면 "")
    """
    return unescape_extra_entities(strip_markup_tags(text)).strip()
