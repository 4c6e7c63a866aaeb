"""S3-backed context: listing, buffered uploads and the context facade."""

from s3_context.store.listing import DEFAULT_PAGE_SIZE, list_objects
from s3_context.store.object_context import ObjectContext, s3_context
from s3_context.store.streams import BufferedUploadStream, S3ObjectIO, is_missing_object

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "BufferedUploadStream",
    "ObjectContext",
    "S3ObjectIO",
    "is_missing_object",
    "list_objects",
    "s3_context",
]
