"""앱 진입점 - 목록 크롤링(akc-crawl) / 설명 보강(akc-enrich)

두 단계는 스냅샷 파일로만 연결됩니다. 명령행 옵션은 없습니다.
"""
import asyncio
from typing import Awaitable, Optional, TypeVar

from src.core.exceptions import BreedCatalogException, EmptyCatalogException
from src.core.logging import logger
from src.crawlers import Fetcher, PageFetcher, Sleeper
from src.crawlers.akc import BreedCatalogCrawler, CrawlReport, DescriptionEnricher
from src.crawlers.akc.metrics import EnrichmentMetrics
from src.crawlers.http_client import shutdown_shared_http_client
from src.repositories import BreedSnapshotRepository


T = TypeVar("T")

SAMPLE_SIZE = 5


async def run_crawl(
    fetcher: Optional[Fetcher] = None,
    repository: Optional[BreedSnapshotRepository] = None,
    sleep: Sleeper = asyncio.sleep,
) -> CrawlReport:
    """목록 크롤링 후 스냅샷 저장.

    Raises:
        EmptyCatalogException: 수집된 레코드가 0건 (스냅샷은 건드리지 않음)
        SnapshotWriteException: 스냅샷 저장 실패
    """
    crawler = BreedCatalogCrawler(fetcher or PageFetcher(), sleep=sleep)
    report = await crawler.crawl()

    if not report.records:
        raise EmptyCatalogException(details={"state": report.state.value, "last_page": report.last_page})

    logger.info(f"[APP] Total breeds scraped: {len(report.records)} (state={report.state.value})")
    logger.info("[APP] Sample breeds:")
    for idx, breed in enumerate(report.records[:SAMPLE_SIZE], start=1):
        logger.info(f"[APP] {idx}. {breed.name}")
        logger.info(f"[APP]    Link: {breed.detail_link}")
        logger.info(f"[APP]    Image: {breed.image_url}")
        logger.info(f"[APP]    Description: {breed.description}")

    (repository or BreedSnapshotRepository()).save(report.records)
    return report


async def run_enrich(
    fetcher: Optional[Fetcher] = None,
    repository: Optional[BreedSnapshotRepository] = None,
    sleep: Sleeper = asyncio.sleep,
) -> EnrichmentMetrics:
    """스냅샷을 읽어 설명을 보강하고, 레코드마다 다시 저장.

    Raises:
        SnapshotReadException: 스냅샷 읽기 실패
        SnapshotWriteException: 스냅샷 저장 실패
    """
    repository = repository or BreedSnapshotRepository()
    logger.info("[APP] Starting breed description enrichment...")

    breeds = repository.load()
    logger.info(f"[APP] Loaded {len(breeds)} breeds from {repository.path}")

    enricher = DescriptionEnricher(fetcher or PageFetcher(), repository, sleep=sleep)
    metrics = await enricher.enrich(breeds)

    logger.info("[APP] Summary:")
    logger.info(f"[APP]    Total breeds: {metrics.total}")
    logger.info(f"[APP]    Enhanced: {metrics.enhanced}")
    logger.info(f"[APP]    Unchanged: {metrics.unchanged}")
    logger.info(f"[APP]    Success rate: {metrics.success_percent}%")
    return metrics


async def _with_shared_http_client(coro: Awaitable[T]) -> T:
    """실행 후 공유 HTTP 세션 정리 (lifespan 역할)"""
    try:
        return await coro
    finally:
        await shutdown_shared_http_client()


def crawl_main() -> int:
    try:
        asyncio.run(_with_shared_http_client(run_crawl()))
    except EmptyCatalogException as e:
        logger.error(f"[APP] {e.message}")
        return 0
    except BreedCatalogException as e:
        logger.error(f"[APP] Crawl failed: {e}")
        return 1
    return 0


def enrich_main() -> int:
    try:
        asyncio.run(_with_shared_http_client(run_enrich()))
    except BreedCatalogException as e:
        logger.error(f"[APP] Enrichment failed: {e}")
        return 1
    return 0
