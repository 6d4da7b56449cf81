"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class BreedCatalogException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 크롤러 관련 예외
class CrawlerException(BreedCatalogException):
    """크롤러 관련 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CRAWLER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CRAWLER_ERROR", details)


class FetchFailedException(CrawlerException):
    """전송 계층 실패 (DNS/TLS/타임아웃/연결 끊김)

    PageFetcher가 TransientError로 변환하므로 fetcher 밖으로 나가지 않습니다.
    """
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"GET {url} failed: {reason}"
        super().__init__(message, "FETCH_FAILED", details or {"url": url, "reason": reason})


class EmptyCatalogException(CrawlerException):
    """크롤링 결과가 0건 (치명적 상황에 준하지만 종료 코드는 0)"""
    def __init__(self, details: Optional[dict[str, Any]] = None):
        message = "No breeds were scraped. Check the HTML parsing logic."
        super().__init__(message, "EMPTY_CATALOG", details)


# 스냅샷 관련 예외
class SnapshotException(BreedCatalogException):
    """스냅샷 파일 관련 예외"""
    def __init__(self, message: str, error_code: str = "SNAPSHOT_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "SNAPSHOT_ERROR", details)


class SnapshotReadException(SnapshotException):
    """스냅샷 읽기 실패 (파일 없음, JSON 오류, 레코드 형식 오류)"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to load snapshot '{path}': {reason}"
        super().__init__(message, "SNAPSHOT_READ_ERROR", details or {"path": path, "reason": reason})


class SnapshotWriteException(SnapshotException):
    """스냅샷 쓰기 실패"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to save snapshot '{path}': {reason}"
        super().__init__(message, "SNAPSHOT_WRITE_ERROR", details or {"path": path, "reason": reason})
