"""공유 HTTP 클라이언트 (curl_cffi)

- 요청마다 AsyncSession을 만들면 TLS/커넥션 오버헤드가 커지므로
  프로세스 단위로 세션을 재사용합니다.
- 프로세스 종료 시 close()로 정리합니다.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Dict

from curl_cffi.requests import AsyncSession

from src.core.config import settings
from src.core.exceptions import FetchFailedException
from src.core.logging import logger


# 고정 식별 헤더 (정책 상수)
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class SharedHttpClient:
    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._session: Optional[AsyncSession] = None

    async def _ensure_session(self) -> AsyncSession:
        async with self._lock:
            if self._session is not None:
                return self._session
            self._session = AsyncSession(
                impersonate=settings.crawler_http_impersonate,
                headers=self.default_headers(),
                allow_redirects=True,
                trust_env=False,
            )
            return self._session

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def get_text(self, url: str, *, timeout_s: float) -> tuple[int, str]:
        """GET 후 (status, text) 반환. 전송 실패는 FetchFailedException."""
        sess = await self._ensure_session()
        try:
            resp = await sess.get(url, headers=self.default_headers(), timeout=timeout_s)
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] GET failed: {type(e).__name__}: {repr(e)}")
            raise FetchFailedException(url, f"{type(e).__name__}: {e}") from e
        status = getattr(resp, "status_code", 0) or 0
        text = getattr(resp, "text", "") or ""
        return status, text

    async def close(self) -> None:
        async with self._lock:
            if self._session is None:
                return
            try:
                await self._session.close()
            except Exception as e:
                logger.debug(f"[HTTP_CLIENT] close failed: {type(e).__name__}: {e}")
            self._session = None


_shared_http_client = SharedHttpClient()


def get_shared_http_client() -> SharedHttpClient:
    return _shared_http_client


async def shutdown_shared_http_client() -> None:
    await _shared_http_client.close()
