"""설정 관리 - 환경 변수 로드 및 검증

크롤링 정책(요청 간격, 실패 임계값, URL)은 고정 상수이므로 여기 두지 않습니다.
이 모듈은 프로세스 환경(스냅샷 위치, 전송 계층 타임아웃, 로그 레벨)만 다룹니다.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 스냅샷 (크롤링 결과 / 보강 입력·출력)
    snapshot_path: str = "breeds.json"

    # HTTP 전송 계층
    # - crawler_http_timeout_s: 단일 요청 타임아웃. 초과 시 TransientError로 분류됩니다.
    crawler_http_timeout_s: float = 30.0
    crawler_http_impersonate: str = "chrome110"

    # 로깅
    log_level: str = "INFO"

    @field_validator("snapshot_path")
    @classmethod
    def validate_snapshot_path(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("snapshot_path must not be empty")
        return v.strip()

    @field_validator("crawler_http_timeout_s")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("crawler_http_timeout_s must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
