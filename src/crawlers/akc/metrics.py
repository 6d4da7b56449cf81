"""Enrichment tally tracking."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class EnrichmentMetrics:
    """설명 보강 결과 집계.

    - enhanced: description이 바뀐 레코드 수
    - unchanged: 바뀌지 않은 레코드 수 (요청 실패, 추출 실패, 더 짧은 결과 포함)
    """

    enhanced: int = 0
    unchanged: int = 0

    def record_enhanced(self) -> None:
        self.enhanced += 1

    def record_unchanged(self) -> None:
        self.unchanged += 1

    @property
    def total(self) -> int:
        return self.enhanced + self.unchanged

    @property
    def success_rate(self) -> float:
        """보강 성공률 (0.0~1.0)."""
        return self.enhanced / self.total if self.total > 0 else 0.0

    @property
    def success_percent(self) -> int:
        """보강 성공률 (정수 %, 반올림)."""
        return int(math.floor(self.success_rate * 100 + 0.5))

    def __repr__(self) -> str:
        return (
            f"Metrics(total={self.total}, enhanced={self.enhanced}, "
            f"unchanged={self.unchanged}, success_rate={self.success_percent}%)"
        )
