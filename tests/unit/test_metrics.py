"""보강 결과 집계 테스트"""
import pytest

from src.crawlers.akc.metrics import EnrichmentMetrics


def test_initial_state():
    metrics = EnrichmentMetrics()

    assert metrics.total == 0
    assert metrics.success_rate == 0.0
    assert metrics.success_percent == 0


def test_record_counts():
    metrics = EnrichmentMetrics()
    metrics.record_enhanced()
    metrics.record_unchanged()
    metrics.record_unchanged()

    assert (metrics.enhanced, metrics.unchanged, metrics.total) == (1, 2, 3)


@pytest.mark.parametrize(
    "enhanced, unchanged, percent",
    [
        (1, 2, 33),
        (2, 1, 67),
        (1, 1, 50),
        (1, 7, 13),  # 12.5 → 13 (half up)
        (3, 5, 38),  # 37.5 → 38
        (5, 0, 100),
        (0, 4, 0),
    ],
)
def test_success_percent_rounds_half_up(enhanced, unchanged, percent):
    assert EnrichmentMetrics(enhanced=enhanced, unchanged=unchanged).success_percent == percent


def test_repr_contains_summary():
    text = repr(EnrichmentMetrics(enhanced=1, unchanged=3))

    assert "total=4" in text
    assert "success_rate=25%" in text
