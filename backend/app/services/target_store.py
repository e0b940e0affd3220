"""Single-slot JSON store for the current target name."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

GENERATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class TargetStoreError(RuntimeError):
    """Raised when the stored target record cannot be read."""


@dataclass(frozen=True, slots=True)
class TargetRecord:
    latest_name: str
    generated_at: str


class TargetNameStore:
    """File-backed register holding at most one target name.

    The record is `{"latest_name": ..., "generated_at": ...}`. A missing file
    means no target has been set. Writes replace the file atomically.
    """

    def __init__(self, storage_path: str | Path) -> None:
        self.path = Path(storage_path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def get_latest(self) -> str | None:
        record = self.get_record()
        return record.latest_name if record is not None else None

    def get_record(self) -> TargetRecord | None:
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.exception("target_store.read_failed path=%s", self.path)
            raise TargetStoreError(f"Cannot read target record at {self.path}") from exc
        if not isinstance(payload, dict):
            raise TargetStoreError(f"Unexpected target record format at {self.path}")

        name = payload.get("latest_name")
        if not isinstance(name, str):
            return None
        generated_at = payload.get("generated_at")
        return TargetRecord(latest_name=name, generated_at=str(generated_at or ""))

    def save(self, name: str, *, generated_at: datetime | None = None) -> TargetRecord:
        record = TargetRecord(
            latest_name=name,
            generated_at=(generated_at or datetime.now()).strftime(GENERATED_AT_FORMAT),
        )
        payload = json.dumps(
            {"latest_name": record.latest_name, "generated_at": record.generated_at},
            indent=4,
            ensure_ascii=False,
        )
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("target_store.saved path=%s generated_at=%s", self.path, record.generated_at)
        return record

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.info("target_store.cleared path=%s", self.path)
