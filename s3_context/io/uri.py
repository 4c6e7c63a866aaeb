from __future__ import annotations

from collections.abc import Iterable


def _pieces(part: object) -> list[str]:
    return [piece for piece in str(part).split("/") if piece and piece != "."]


def normalize_root(root: str | None) -> str | None:
    """Normalize a context root: ``None``, ``""`` and ``"."`` all mean no root."""

    if root is None:
        return None
    pieces = _pieces(root)
    return "/".join(pieces) or None


def join_key(root: str | None, segments: Iterable[object]) -> str:
    """Join a root and naming-convention segments into an object key.

    Always uses ``/`` regardless of ``os.sep``. Leading/trailing separators and
    empty segments are dropped, so the result is stable under re-joining.
    """

    parts: list[str] = []
    if root is not None:
        parts.extend(_pieces(root))
    for segment in segments:
        parts.extend(_pieces(segment))
    return "/".join(parts)


def key_prefix(root: str | None) -> str | None:
    """Listing prefix for everything stored under root (``None`` for the whole bucket)."""

    normalized = normalize_root(root)
    if normalized is None:
        return None
    return f"{normalized}/"


def split_key(key: str, root: str | None = None) -> list[str]:
    """Split a key into segments, dropping the root segments when present."""

    segments = key.split("/")
    root_segments = _pieces(root) if root is not None else []
    if root_segments and segments[: len(root_segments)] == root_segments:
        return segments[len(root_segments) :]
    return segments
