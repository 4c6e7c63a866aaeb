from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from s3_context.config import S3ConnectionConfig, coerce_config, create_s3_client
from s3_context.context import Context, ensure_empty
from s3_context.domain.models import (
    ABSENT,
    ContextEntry,
    Location,
    ObjectInfo,
    ObjectSummary,
    Spec,
)
from s3_context.errors import ConversionError
from s3_context.io.uri import join_key, key_prefix, normalize_root, split_key
from s3_context.naming import NamingConvention, PathLiteralConvention
from s3_context.observability import log_event
from s3_context.store.listing import DEFAULT_PAGE_SIZE, list_objects
from s3_context.store.streams import S3ObjectIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObjectContext(Context):
    """Context backed by one S3 bucket, optionally under a root prefix.

    Holds no mutable state; every call is an independent request against the
    store. Objects of size zero are directory placeholders and never listed.
    """

    config: S3ConnectionConfig
    bucket: str
    naming_convention: NamingConvention
    root: str | None = None
    client: Any = field(default=None, repr=False, compare=False)
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not self.bucket:
            raise ValueError("bucket is required")
        object.__setattr__(self, "root", normalize_root(self.root))
        if self.client is None:
            object.__setattr__(self, "client", create_s3_client(self.config))

    def key_for(self, spec: Spec) -> str:
        return join_key(self.root, self.naming_convention.spec_to_path(spec))

    def _list_summaries(self, prefix: str | None) -> Iterator[ObjectSummary]:
        return list_objects(self.client, self.bucket, prefix, page_size=self.page_size)

    def io(self, spec: Spec) -> S3ObjectIO:
        return S3ObjectIO(self.client, self.bucket, self.key_for(spec))

    def resolve(self, spec: Spec) -> Location:
        return Location(
            bucket=self.bucket,
            key=self.key_for(spec),
            endpoint=self.config.endpoint_url,
        )

    def info(self, spec: Spec, hint: ObjectSummary | ContextEntry | None = None) -> ObjectInfo:
        """Size and last-modified (epoch ms) of spec's object.

        A hint from ``list_entries`` whose key matches spec is returned as-is
        without a request, so it may be stale. A hint for any other key is
        ignored. A missing object yields ``ABSENT`` rather than an error.
        """

        key = self.key_for(spec)
        hinted = hint.summary if isinstance(hint, ContextEntry) else hint
        if isinstance(hinted, ObjectSummary) and hinted.key == key:
            return ObjectInfo(size=hinted.size, last_modified=hinted.last_modified)

        # The prefix listing can also match longer keys that start with key.
        for summary in self._list_summaries(key):
            if summary.key == key:
                return ObjectInfo(size=summary.size, last_modified=summary.last_modified)
        return ABSENT

    def list_entries(self, *, strict: bool = False) -> Iterator[ContextEntry]:
        for summary in self._list_summaries(key_prefix(self.root)):
            if summary.size == 0:
                continue
            entry = self._read_entry(summary, strict=strict)
            if entry is not None:
                yield entry

    def _read_entry(self, summary: ObjectSummary, *, strict: bool) -> ContextEntry | None:
        try:
            spec = self.naming_convention.path_to_spec(split_key(summary.key, self.root))
        except Exception as exc:  # noqa: BLE001
            if strict:
                raise ConversionError(summary.key) from exc
            logger.debug("Skipping unconvertible key=%s error=%s", summary.key, exc)
            return None
        if spec is None:
            if strict:
                raise ConversionError(summary.key)
            return None
        return ContextEntry(spec=spec, summary=summary)

    def delete(self, spec: Spec | None = None) -> None:
        if spec is not None:
            self.client.delete_object(Bucket=self.bucket, Key=self.key_for(spec))
            return

        ensure_empty(self, logger, bucket=self.bucket, root=self.root)

        # Placeholders (size zero) are only visible in the raw listing.
        deleted = 0
        for summary in self._list_summaries(key_prefix(self.root)):
            self.client.delete_object(Bucket=self.bucket, Key=summary.key)
            deleted += 1
        log_event(
            logger,
            "context.delete",
            stage="done",
            bucket=self.bucket,
            root=self.root,
            deleted=deleted,
        )


def s3_context(
    config: S3ConnectionConfig | Mapping[str, Any] | None,
    bucket: str,
    naming_convention: NamingConvention | None = None,
    root: str | None = None,
    *,
    client: Any = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ObjectContext:
    """Create an S3-backed context.

    Args:
        config: ``S3ConnectionConfig`` or a mapping with ``endpoint``,
            ``access_key``, ``secret_key``, ``region``... Missing credentials
            fall back to boto3's ambient credential chain.
        bucket: The S3 bucket name.
        naming_convention: Spec <-> path mapping. Defaults to path literals
            (``s3://bucket/some/key``).
        root: Optional path from the bucket root under which the naming
            convention applies; ``None`` and ``"."`` mean the bucket root.
        client: Pre-built boto3 S3 client; created from config when omitted.
    """

    return ObjectContext(
        config=coerce_config(config),
        bucket=bucket,
        naming_convention=naming_convention or PathLiteralConvention(bucket),
        root=root,
        client=client,
        page_size=page_size,
    )
