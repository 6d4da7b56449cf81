"""AKC breed catalog crawler modules.

구조:
- listing_parsing.py : 목록 페이지 카드 파싱
- crawler.py : BreedCatalogCrawler (페이지네이션 상태 머신)
- detail_parsing.py : 상세 페이지 임베디드 JSON 추출
- enricher.py : DescriptionEnricher (설명 보강 + 진행 저장)
- metrics.py : 보강 집계
"""

from .crawler import BreedCatalogCrawler, CrawlReport, CrawlState
from .enricher import DescriptionEnricher, should_replace

__all__ = [
    "BreedCatalogCrawler",
    "CrawlReport",
    "CrawlState",
    "DescriptionEnricher",
    "should_replace",
]
