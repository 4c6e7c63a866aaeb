from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

from s3_context.context import Context, ensure_empty
from s3_context.domain.models import (
    ABSENT,
    ContextEntry,
    ObjectInfo,
    ObjectSummary,
    Spec,
)
from s3_context.errors import ConversionError
from s3_context.naming import NamingConvention
from s3_context.observability import log_event

logger = logging.getLogger(__name__)


class LocalFileIO:
    """Byte source/sink for a single local file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def input_stream(self) -> IO[bytes]:
        return self.path.open("rb")

    def output_stream(self, *, append: bool = False) -> IO[bytes]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return self.path.open("ab" if append else "wb")

    def open(self, mode: str = "rb") -> IO[bytes]:
        if mode in {"r", "rb"}:
            return self.input_stream()
        if mode in {"w", "wb"}:
            return self.output_stream()
        if mode in {"a", "ab"}:
            return self.output_stream(append=True)
        raise ValueError(f"Unsupported mode: {mode!r}")


@dataclass
class LocalContext(Context):
    """Context stored as files under ``root_dir`` on the local filesystem."""

    root_dir: Path
    naming_convention: NamingConvention

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir).resolve()

    def path_for(self, spec: Spec) -> Path:
        path = self.root_dir.joinpath(*self.naming_convention.spec_to_path(spec)).resolve()
        try:
            path.relative_to(self.root_dir)
        except ValueError as exc:
            raise ValueError(f"Path escapes root_dir: {path}") from exc
        return path

    def io(self, spec: Spec) -> LocalFileIO:
        return LocalFileIO(self.path_for(spec))

    def resolve(self, spec: Spec) -> str:
        return str(self.path_for(spec))

    def info(self, spec: Spec, hint: Any = None) -> ObjectInfo:
        path = self.path_for(spec)
        rel = path.relative_to(self.root_dir).as_posix()
        hinted = hint.summary if isinstance(hint, ContextEntry) else hint
        if isinstance(hinted, ObjectSummary) and hinted.key == rel:
            return ObjectInfo(size=hinted.size, last_modified=hinted.last_modified)
        if not path.is_file():
            return ABSENT
        stat = path.stat()
        return ObjectInfo(size=stat.st_size, last_modified=stat.st_mtime_ns // 1_000_000)

    def list_entries(self, *, strict: bool = False) -> Iterator[ContextEntry]:
        if not self.root_dir.exists():
            return
        for file_path in sorted(self.root_dir.rglob("*")):
            if not file_path.is_file():
                continue
            stat = file_path.stat()
            if stat.st_size == 0:
                continue
            rel = file_path.relative_to(self.root_dir).as_posix()
            try:
                spec = self.naming_convention.path_to_spec(rel.split("/"))
            except Exception as exc:  # noqa: BLE001
                if strict:
                    raise ConversionError(rel) from exc
                continue
            if spec is None:
                if strict:
                    raise ConversionError(rel)
                continue
            summary = ObjectSummary(
                key=rel,
                size=stat.st_size,
                last_modified=stat.st_mtime_ns // 1_000_000,
                base_name=file_path.name,
            )
            yield ContextEntry(spec=spec, summary=summary)

    def delete(self, spec: Spec | None = None) -> None:
        if spec is not None:
            self.path_for(spec).unlink(missing_ok=True)
            return

        ensure_empty(self, logger, root_dir=self.root_dir)
        if self.root_dir.exists():
            shutil.rmtree(self.root_dir)
        log_event(logger, "context.delete", stage="done", root_dir=self.root_dir)
