"""PageFetcher - 단일 GET 요청 + 결과 분류

- 404는 페이지네이션 종료 신호(NOT_FOUND)로만 사용합니다.
- 그 외 비정상 상태 코드와 전송 실패는 모두 TRANSIENT_ERROR입니다.
- 내부 재시도는 하지 않습니다. 재시도 정책은 호출자 몫입니다.
"""

from __future__ import annotations

from typing import Optional

from src.core.config import settings
from src.core.exceptions import FetchFailedException
from src.core.logging import logger, truncate_for_log

from .http_client import SharedHttpClient, get_shared_http_client
from .result import FetchResult


NOT_FOUND_STATUS = 404


class PageFetcher:
    """curl_cffi 공유 세션 기반 Fetcher 구현."""

    def __init__(self, client: Optional[SharedHttpClient] = None, *, timeout_s: Optional[float] = None) -> None:
        self._client = client or get_shared_http_client()
        self._timeout_s = timeout_s if timeout_s is not None else settings.crawler_http_timeout_s

    async def fetch(self, url: str) -> FetchResult:
        logger.info(f"[FETCH] Fetching: {truncate_for_log(url)}")
        try:
            status, body = await self._client.get_text(url, timeout_s=self._timeout_s)
        except FetchFailedException as e:
            logger.warning(f"[FETCH] Error fetching {url}: {e.details.get('reason', e.message)}")
            return FetchResult.transient_error(url, e.details.get("reason", e.message))

        if status == NOT_FOUND_STATUS:
            logger.info(f"[FETCH] HTTP 404 for {truncate_for_log(url)}")
            return FetchResult.not_found(url)

        if 200 <= status < 300:
            logger.debug(f"[FETCH] OK (status={status}, len={len(body)})")
            return FetchResult.success(url, body, status_code=status)

        logger.warning(f"[FETCH] Error fetching {url}: HTTP {status}")
        return FetchResult.transient_error(url, f"HTTP {status}", status_code=status)
