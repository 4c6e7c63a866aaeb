"""Test doubles for exercising contexts without a live store."""

from s3_context.testing.fake_client import FakeS3Client, StoreOp

__all__ = ["FakeS3Client", "StoreOp"]
