from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from s3_context.domain.models import ContextEntry, ObjectInfo, Spec
from s3_context.errors import NotEmptyError, VerificationFailedError
from s3_context.observability import log_event


class Context(ABC):
    """Mapping between specs and stored byte streams.

    Implementations differ only in where the bytes live; the naming
    convention decides how a spec becomes a path.
    """

    @abstractmethod
    def io(self, spec: Spec) -> Any:
        """Return a byte source/sink with ``input_stream``/``output_stream``/``open``."""

    @abstractmethod
    def resolve(self, spec: Spec) -> Any:
        """Return the backend-native address of spec without touching storage."""

    @abstractmethod
    def delete(self, spec: Spec | None = None) -> None:
        """Delete one spec, or the whole (empty) context when spec is omitted."""

    @abstractmethod
    def info(self, spec: Spec, hint: Any = None) -> ObjectInfo:
        """Return size/last-modified for spec; ``ABSENT`` when nothing is stored."""

    @abstractmethod
    def list_entries(self, *, strict: bool = False) -> Iterator[ContextEntry]:
        """Yield every stored item as a spec plus its raw summary."""

    def list(self, *, strict: bool = False) -> Iterator[Spec]:
        for entry in self.list_entries(strict=strict):
            yield entry.spec


def ensure_empty(context: Context, logger: logging.Logger, **log_fields: object) -> None:
    """Refuse (fail closed) unless context provably holds no items."""

    try:
        remaining = list(context.list(strict=True))
    except Exception as exc:  # noqa: BLE001
        log_event(logger, "context.delete", stage="refused", reason="unverified", **log_fields)
        raise VerificationFailedError(
            "Couldn't verify that context was empty before deletion."
        ) from exc

    if remaining:
        log_event(
            logger,
            "context.delete",
            stage="refused",
            reason="not_empty",
            item_count=len(remaining),
            **log_fields,
        )
        raise NotEmptyError(remaining)
