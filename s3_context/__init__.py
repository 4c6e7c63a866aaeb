"""Stable public imports for `s3_context`.

Lower-level utilities should be imported from their submodules explicitly.
"""

from s3_context.config import (
    S3ConnectionConfig,
    build_s3_connection_config_from_env,
    create_s3_client,
    load_s3_connection_config,
)
from s3_context.context import Context
from s3_context.copy import copy_spec
from s3_context.domain import ABSENT, ContextEntry, Location, ObjectInfo, ObjectSummary
from s3_context.errors import (
    ContextError,
    ConversionError,
    InvalidPathError,
    NotEmptyError,
    VerificationFailedError,
)
from s3_context.local import LocalContext
from s3_context.naming import (
    Field,
    FileName,
    Literal,
    NamingConvention,
    PathConvention,
    PathLiteralConvention,
    SplitBy,
    UtcTimestamp,
)
from s3_context.store import BufferedUploadStream, ObjectContext, s3_context

__all__ = [
    "ABSENT",
    "BufferedUploadStream",
    "Context",
    "ContextEntry",
    "ContextError",
    "ConversionError",
    "Field",
    "FileName",
    "InvalidPathError",
    "Literal",
    "LocalContext",
    "Location",
    "NamingConvention",
    "NotEmptyError",
    "ObjectContext",
    "ObjectInfo",
    "ObjectSummary",
    "PathConvention",
    "PathLiteralConvention",
    "S3ConnectionConfig",
    "SplitBy",
    "UtcTimestamp",
    "VerificationFailedError",
    "build_s3_connection_config_from_env",
    "copy_spec",
    "create_s3_client",
    "load_s3_connection_config",
    "s3_context",
]
