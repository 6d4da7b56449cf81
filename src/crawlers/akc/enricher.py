"""견종 설명 보강기 - 상세 페이지의 긴 설명으로 교체

- 레코드 순서대로 하나씩 처리 (병렬 없음)
- 추출 결과가 비어 있지 않고 현재 설명보다 길 때만 교체
- 레코드마다 스냅샷 전체를 다시 저장 (크래시 시 손실은 처리 중인 1건 이하)
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional

from src.core.logging import logger
from src.crawlers.protocols import Fetcher, Sleeper
from src.repositories.snapshot_repository import BreedSnapshotRepository
from src.schemas.breed_schema import BreedRecord

from .detail_parsing import extract_full_description
from .metrics import EnrichmentMetrics


# 고정 정책 상수
ENRICH_DELAY_S = 7.0


def should_replace(current: str, candidate: Optional[str]) -> bool:
    """더 길면 더 낫다: 비어 있지 않고 현재보다 엄격히 길 때만 교체."""
    if not candidate:
        return False
    return len(candidate) > len(current or "")


class DescriptionEnricher:
    """설명 보강기 - SRP: 상세 페이지 추출 + 병합 + 진행 저장"""

    def __init__(
        self,
        fetcher: Fetcher,
        repository: BreedSnapshotRepository,
        *,
        sleep: Sleeper = asyncio.sleep,
        extract: Callable[[str], Optional[str]] = extract_full_description,
    ) -> None:
        self._fetcher = fetcher
        self._repository = repository
        self._sleep = sleep
        self._extract = extract

    async def enrich_breed(self, breed: BreedRecord) -> bool:
        """레코드 1건 보강. description이 바뀌었으면 True.

        요청 실패/추출 실패는 레코드를 그대로 두고 False를 반환합니다.
        """
        try:
            result = await self._fetcher.fetch(breed.detail_link)
            if not result.is_success:
                logger.warning(f"[ENRICH] Failed to fetch page for {breed.name} ({result.detail})")
                return False

            full_description = self._extract(result.body or "")
            if not should_replace(breed.description, full_description):
                logger.info(f"[ENRICH] No improvement found for {breed.name}")
                return False

            logger.info(
                f"[ENRICH] Enhanced description for {breed.name} "
                f"({len(breed.description)} → {len(full_description)} chars)"
            )
            breed.description = full_description
            return True
        except Exception as e:
            logger.error(f"[ENRICH] Error processing {breed.name}: {type(e).__name__}: {e}")
            return False

    async def enrich(self, breeds: List[BreedRecord]) -> EnrichmentMetrics:
        """전체 레코드를 순서대로 보강하고 집계를 반환.

        스냅샷 저장 실패(SnapshotWriteException)는 치명적이므로 그대로 전파합니다.
        """
        metrics = EnrichmentMetrics()
        total = len(breeds)

        for idx, breed in enumerate(breeds):
            logger.info(f"[ENRICH] [{idx + 1}/{total}] Processing {breed.name}...")

            changed = await self.enrich_breed(breed)

            # 진행 상황 즉시 저장 (덮어쓰기)
            self._repository.save(breeds)

            if changed:
                metrics.record_enhanced()
            else:
                metrics.record_unchanged()

            if idx < total - 1:
                logger.info(f"[ENRICH] Waiting {ENRICH_DELAY_S:.0f} seconds...")
                await self._sleep(ENRICH_DELAY_S)

        return metrics
