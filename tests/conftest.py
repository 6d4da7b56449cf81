"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 주입 (기록용 Sleeper, 상세 페이지/레코드 팩토리)

금지:
- 실제 네트워크 요청
- 실제 벽시계 대기
"""

from __future__ import annotations

import html
import json
import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.schemas.breed_schema import BreedRecord  # noqa: E402
from tests.fakes import RecordingSleeper  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def detail_page_html():
    """data-js-props dict → 상세 페이지 HTML (속성값은 HTML-escape)"""

    def _build(props) -> str:
        attr = html.escape(json.dumps(props), quote=True)
        return (
            "<html><body>"
            f'<div class="breed-page" data-js-component="breedPage" data-js-props="{attr}"></div>'
            "</body></html>"
        )

    return _build


@pytest.fixture
def make_breed():
    """BreedRecord 팩토리"""

    def _make(name: str, description: str = "", slug: str | None = None) -> BreedRecord:
        slug = slug or name.lower().replace(" ", "-")
        return BreedRecord(
            name=name,
            detail_link=f"https://www.akc.org/dog-breeds/{slug}/",
            image_url=f"https://www.akc.org/wp-content/uploads/{slug}.jpg",
            description=description,
        )

    return _make
