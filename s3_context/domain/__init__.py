"""Value types shared by every context implementation."""

from s3_context.domain.models import (
    ABSENT,
    ContextEntry,
    Location,
    ObjectInfo,
    ObjectSummary,
    Spec,
    to_epoch_ms,
)

__all__ = [
    "ABSENT",
    "ContextEntry",
    "Location",
    "ObjectInfo",
    "ObjectSummary",
    "Spec",
    "to_epoch_ms",
]
