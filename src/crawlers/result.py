"""Fetch Result Standard Format

단일 GET 요청 결과의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FetchStatus(str, Enum):
    """요청 결과 분류

    재시도 정책은 호출자(크롤러/보강기)가 결정합니다.
    """

    SUCCESS = "success"  # 2xx + 본문
    NOT_FOUND = "not_found"  # 404, 페이지네이션 종료 신호
    TRANSIENT_ERROR = "transient_error"  # 그 외 상태 코드, 네트워크 실패


@dataclass
class FetchResult:
    """요청 결과 표준 포맷

    Attributes:
        status: 결과 분류
        url: 요청 URL
        body: 응답 본문 (SUCCESS일 때만)
        status_code: HTTP 상태 코드 (응답을 받은 경우)
        detail: 실패 사유 (TRANSIENT_ERROR일 때)
    """

    status: FetchStatus
    url: str
    body: Optional[str] = None
    status_code: Optional[int] = None
    detail: Optional[str] = None

    @classmethod
    def success(cls, url: str, body: str, status_code: int = 200) -> "FetchResult":
        return cls(status=FetchStatus.SUCCESS, url=url, body=body, status_code=status_code)

    @classmethod
    def not_found(cls, url: str) -> "FetchResult":
        return cls(status=FetchStatus.NOT_FOUND, url=url, status_code=404, detail="HTTP 404")

    @classmethod
    def transient_error(cls, url: str, detail: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(status=FetchStatus.TRANSIENT_ERROR, url=url, status_code=status_code, detail=detail)

    @property
    def is_success(self) -> bool:
        return self.status is FetchStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        return self.status is FetchStatus.NOT_FOUND

    @property
    def is_transient_error(self) -> bool:
        return self.status is FetchStatus.TRANSIENT_ERROR
