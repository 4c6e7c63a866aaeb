"""Byte-stream I/O over whole-object GET/PUT.

S3 has no partial writes or appends, so writes accumulate in memory and are
uploaded with a single PUT when the stream is closed.
"""

from __future__ import annotations

import io
import logging
from typing import Any

from botocore.exceptions import ClientError

from s3_context.observability import log_event

logger = logging.getLogger(__name__)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


def is_missing_object(exc: BaseException) -> bool:
    """Return True when exc is the store's "object does not exist" error."""

    if not isinstance(exc, ClientError):
        return False
    error = exc.response.get("Error") or {}
    return str(error.get("Code") or "") in _MISSING_CODES


class BufferedUploadStream:
    """Writable stream bound to one object key, uploaded once on close.

    Single use: ``open() -> write()* -> close()``. With ``append=True``,
    ``open()`` first copies the current object into the buffer (a missing
    object behaves like a fresh create). Closing, including via ``with`` when
    the block raised, performs exactly one ``put_object``.
    """

    def __init__(self, client: Any, bucket: str, key: str, *, append: bool = False) -> None:
        self._client = client
        self.bucket = bucket
        self.key = key
        self.append = append
        self._buffer = io.BytesIO()
        self._opened = False
        self._closed = False

    def open(self) -> "BufferedUploadStream":
        if self._opened:
            raise ValueError("stream already opened")
        self._opened = True
        if self.append:
            try:
                response = self._client.get_object(Bucket=self.bucket, Key=self.key)
            except ClientError as exc:
                if not is_missing_object(exc):
                    raise
            else:
                body = response["Body"]
                try:
                    self._buffer.write(body.read())
                finally:
                    body.close()
        return self

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        return self._buffer.getbuffer().nbytes

    def readable(self) -> bool:
        return False

    def writable(self) -> bool:
        return not self._closed

    def write(self, data: bytes | bytearray | memoryview) -> int:
        if self._closed:
            raise ValueError(f"write to closed stream for s3://{self.bucket}/{self.key}")
        if isinstance(data, str):
            raise TypeError("BufferedUploadStream accepts bytes, not str")
        return self._buffer.write(data)

    def flush(self) -> None:
        # Nothing is sent before close.
        return None

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        body = self._buffer.getvalue()
        self._buffer.close()
        self._client.put_object(
            Bucket=self.bucket,
            Key=self.key,
            Body=body,
            ContentLength=len(body),
        )
        log_event(
            logger,
            "stream.upload",
            bucket=self.bucket,
            key=self.key,
            size=len(body),
            append=self.append,
        )

    def __enter__(self) -> "BufferedUploadStream":
        if not self._opened:
            self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


class S3ObjectIO:
    """Byte source/sink for a single object, as returned by ``ObjectContext.io``."""

    def __init__(self, client: Any, bucket: str, key: str) -> None:
        self._client = client
        self.bucket = bucket
        self.key = key

    def input_stream(self) -> Any:
        """Return the streaming GET body (a readable, closable file-like)."""

        response = self._client.get_object(Bucket=self.bucket, Key=self.key)
        return response["Body"]

    def output_stream(self, *, append: bool = False) -> BufferedUploadStream:
        return BufferedUploadStream(self._client, self.bucket, self.key, append=append).open()

    def open(self, mode: str = "rb") -> Any:
        if mode in {"r", "rb"}:
            return self.input_stream()
        if mode in {"w", "wb"}:
            return self.output_stream()
        if mode in {"a", "ab"}:
            return self.output_stream(append=True)
        raise ValueError(f"Unsupported mode: {mode!r}")

    def __repr__(self) -> str:
        return f"S3ObjectIO(bucket={self.bucket!r}, key={self.key!r})"
