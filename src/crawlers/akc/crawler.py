"""AKC 견종 목록 크롤러 - 페이지네이션 상태 머신

INIT → INDEX_ATTEMPT → PAGE_LOOP(page, consecutive_failures) → DONE | ABORTED

- 인덱스 페이지는 한 번만 시도하고, 실패해도 무시합니다.
- 404(NOT_FOUND)는 정상 종료 신호입니다.
- 빈 페이지는 soft failure: 실패 카운트는 올리되 다음 페이지로 넘어갑니다.
- 전송 오류는 같은 페이지를 두 배 지연 후 재시도합니다.
- 연속 실패가 임계값에 도달하면 그때까지 모은 결과로 조기 종료합니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Set

from src.core.logging import logger
from src.crawlers.protocols import Fetcher, Sleeper
from src.schemas.breed_schema import BreedRecord

from .listing_parsing import parse_breed_summaries


# 고정 정책 상수
INDEX_URL = "https://www.akc.org/dog-breeds/"
PAGE_URL = "https://www.akc.org/dog-breeds/page/"
CRAWL_DELAY_S = 5.0
TRANSIENT_BACKOFF_S = CRAWL_DELAY_S * 2
MAX_CONSECUTIVE_FAILURES = 3


class CrawlState(str, Enum):
    """크롤링 상태"""

    INIT = "init"
    INDEX_ATTEMPT = "index_attempt"
    PAGE_LOOP = "page_loop"
    DONE = "done"  # 404로 정상 종료
    ABORTED = "aborted"  # 연속 실패 임계값 도달


@dataclass
class CrawlReport:
    """크롤링 결과

    Attributes:
        records: 중복 제거된 견종 레코드 (최초 발견 순서)
        state: 종료 상태 (DONE | ABORTED)
        last_page: 마지막으로 요청한 페이지 번호
    """

    records: List[BreedRecord] = field(default_factory=list)
    state: CrawlState = CrawlState.INIT
    last_page: int = 0


class BreedCatalogCrawler:
    """견종 목록 크롤러 - SRP: 목록 수집 + 중복 제거만 담당"""

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        sleep: Sleeper = asyncio.sleep,
        parse: Callable[[str], List[BreedRecord]] = parse_breed_summaries,
    ) -> None:
        self._fetcher = fetcher
        self._sleep = sleep
        self._parse = parse
        self.state = CrawlState.INIT

    @staticmethod
    def page_url(page: int) -> str:
        return f"{PAGE_URL}{page}"

    @staticmethod
    def merge_new_breeds(records: List[BreedRecord], seen: Set[str], candidates: List[BreedRecord]) -> int:
        """이름이 처음 등장한 후보만 records에 추가하고, 추가된 개수를 반환.

        같은 페이지 안에서 반복된 이름도 한 번만 추가됩니다.
        """
        added = 0
        for breed in candidates:
            if breed.name in seen:
                continue
            seen.add(breed.name)
            records.append(breed)
            added += 1
        return added

    async def _attempt_index(self, records: List[BreedRecord], seen: Set[str]) -> None:
        self.state = CrawlState.INDEX_ATTEMPT
        logger.info("[CRAWL] Fetching main breeds page...")
        result = await self._fetcher.fetch(INDEX_URL)
        if result.is_success:
            breeds = self._parse(result.body or "")
            added = self.merge_new_breeds(records, seen, breeds)
            logger.info(f"[CRAWL] Found {len(breeds)} breeds on main page ({added} added)")
        else:
            logger.info(f"[CRAWL] Main page failed ({result.detail}), trying paginated approach")
        await self._sleep(CRAWL_DELAY_S)

    async def crawl(self) -> CrawlReport:
        """인덱스 → 페이지네이션 순서로 전체 목록 수집."""
        records: List[BreedRecord] = []
        seen: Set[str] = set()

        logger.info("[CRAWL] Starting AKC breed crawl...")
        await self._attempt_index(records, seen)

        self.state = CrawlState.PAGE_LOOP
        page = 1
        consecutive_failures = 0

        while consecutive_failures < MAX_CONSECUTIVE_FAILURES:
            result = await self._fetcher.fetch(self.page_url(page))

            if result.is_not_found:
                logger.info(f"[CRAWL] Reached end of pages (404) at page {page}")
                self.state = CrawlState.DONE
                return CrawlReport(records=records, state=self.state, last_page=page)

            if result.is_success:
                # 성공 분기: 결과가 비어 있어도 페이지를 전진
                consecutive_failures = self._handle_page_success(page, result.body or "", records, seen, consecutive_failures)
                page += 1
                await self._sleep(CRAWL_DELAY_S)
                continue

            # 전송 오류 분기: 페이지 고정, 같은 페이지 재시도
            consecutive_failures = await self._handle_transient_error(page, result.detail, consecutive_failures)

        logger.warning(
            f"[CRAWL] Stopping after {consecutive_failures} consecutive failures at page {page} "
            f"({len(records)} breeds collected)"
        )
        self.state = CrawlState.ABORTED
        return CrawlReport(records=records, state=self.state, last_page=page)

    def _handle_page_success(
        self,
        page: int,
        html: str,
        records: List[BreedRecord],
        seen: Set[str],
        consecutive_failures: int,
    ) -> int:
        breeds = self._parse(html)
        if not breeds:
            logger.warning(f"[CRAWL] No breeds found on page {page}")
            return consecutive_failures + 1

        logger.info(f"[CRAWL] Found {len(breeds)} breeds on page {page}")
        added = self.merge_new_breeds(records, seen, breeds)
        logger.info(f"[CRAWL] Added {added} new breeds ({len(breeds) - added} duplicates)")
        return 0

    async def _handle_transient_error(self, page: int, detail: Optional[str], consecutive_failures: int) -> int:
        consecutive_failures += 1
        logger.error(f"[CRAWL] Error processing page {page}: {detail}")
        if consecutive_failures < MAX_CONSECUTIVE_FAILURES:
            logger.info(
                f"[CRAWL] Retrying after delay... (attempt {consecutive_failures}/{MAX_CONSECUTIVE_FAILURES})"
            )
            await self._sleep(TRANSIENT_BACKOFF_S)
        return consecutive_failures
