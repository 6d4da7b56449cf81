"""Crawler modules (curl_cffi + selectolax).

공개 API는 이 파일에서만 export합니다.
"""

from .fetcher import PageFetcher
from .protocols import Fetcher, Sleeper
from .result import FetchResult, FetchStatus

__all__ = [
        "PageFetcher",
        "Fetcher",
        "Sleeper",
        "FetchResult",
        "FetchStatus",
]
