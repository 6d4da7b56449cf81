"""Crawler Protocols - Interfaces injected into the crawl/enrich controllers

네트워크와 대기(sleep)를 주입 가능한 경계로 분리해, 상태 머신을
실제 네트워크/벽시계 없이 테스트할 수 있게 합니다.
"""

from typing import Awaitable, Callable, Protocol

from .result import FetchResult


# 협조적 대기 primitive: 초 단위 지연을 await (기본값 asyncio.sleep)
Sleeper = Callable[[float], Awaitable[None]]


class Fetcher(Protocol):
    """페이지 요청자 프로토콜

    구현 예시:
        class PageFetcher(Fetcher):
            async def fetch(self, url: str) -> FetchResult:
                # 단일 GET + 결과 분류
                ...
    """

    async def fetch(self, url: str) -> FetchResult:
        """단일 GET 요청

        Args:
            url: 요청 URL

        Returns:
            FetchResult: SUCCESS / NOT_FOUND / TRANSIENT_ERROR 중 하나.
            네트워크 결과에 대해서는 예외를 던지지 않습니다.
        """
        ...
