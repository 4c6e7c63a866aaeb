from __future__ import annotations

import pytest

from s3_context.config import S3ConnectionConfig
from s3_context.naming import Field, FileName, PathConvention, SplitBy, UtcTimestamp
from s3_context.store import ObjectContext, s3_context
from s3_context.testing.fake_client import FakeS3Client

BUCKET = "test-bucket"


@pytest.fixture
def ticker_naming() -> PathConvention:
    return PathConvention(
        Field("type"),
        FileName(SplitBy("_", Field("name"), UtcTimestamp("ts")), "log"),
    )


@pytest.fixture
def fake_client() -> FakeS3Client:
    return FakeS3Client()


@pytest.fixture
def context(fake_client: FakeS3Client, ticker_naming: PathConvention) -> ObjectContext:
    return s3_context(
        S3ConnectionConfig(endpoint_url="http://minio:9000"),
        BUCKET,
        ticker_naming,
        "t",
        client=fake_client,
    )
