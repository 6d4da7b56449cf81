"""견종 스냅샷 리포지토리 - JSON 파일 기반 영속화.

스냅샷은 레코드 배열 하나로 된 JSON 문서입니다. 연속된 스냅샷을 diff로
비교할 수 있도록 들여쓰기(2칸) 형식으로 저장합니다.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from src.core.config import settings
from src.core.exceptions import SnapshotReadException, SnapshotWriteException
from src.core.logging import logger
from src.schemas.breed_schema import BreedRecord


class BreedSnapshotRepository:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or settings.snapshot_path)

    def load(self) -> List[BreedRecord]:
        """스냅샷 전체를 읽어 레코드 리스트로 반환."""
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"[SNAPSHOT] Error loading {self.path}: {type(e).__name__}: {e}")
            raise SnapshotReadException(str(self.path), f"{type(e).__name__}: {e}") from e

        if not isinstance(payload, list):
            raise SnapshotReadException(str(self.path), "expected a JSON array of breed records")

        try:
            return [BreedRecord.model_validate(item) for item in payload]
        except ValidationError as e:
            logger.error(f"[SNAPSHOT] Invalid breed record in {self.path}: {e}")
            raise SnapshotReadException(str(self.path), f"invalid breed record: {e.error_count()} error(s)") from e

    def save(self, breeds: Iterable[BreedRecord]) -> None:
        """스냅샷 전체를 덮어쓰기 (append 아님).

        임시 파일에 쓴 뒤 os.replace로 교체하므로 쓰는 도중 중단되어도
        이전 스냅샷이 남습니다.
        """
        payload = [breed.to_snapshot_dict() for breed in breeds]
        text = json.dumps(payload, ensure_ascii=False, indent=2)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            logger.error(f"[SNAPSHOT] Error saving {self.path}: {type(e).__name__}: {e}")
            raise SnapshotWriteException(str(self.path), f"{type(e).__name__}: {e}") from e
        logger.info(f"[SNAPSHOT] Saved {len(payload)} breeds to {self.path}")
