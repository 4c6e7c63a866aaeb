"""Naming conventions: spec <-> path segment mappings."""

from s3_context.naming.base import NamingConvention
from s3_context.naming.literal import PathLiteralConvention
from s3_context.naming.parts import (
    Field,
    FileName,
    Literal,
    Part,
    PathConvention,
    SplitBy,
    UtcTimestamp,
)

__all__ = [
    "Field",
    "FileName",
    "Literal",
    "NamingConvention",
    "Part",
    "PathConvention",
    "PathLiteralConvention",
    "SplitBy",
    "UtcTimestamp",
]
