from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from s3_context.store.streams import BufferedUploadStream, S3ObjectIO, is_missing_object
from s3_context.testing.fake_client import FakeS3Client


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "error"}}, "GetObject")


def test_stream_uploads_once_on_close() -> None:
    client = MagicMock()
    stream = BufferedUploadStream(client, "bucket", "a/b.txt").open()

    stream.write(b"hello ")
    stream.write(b"world")
    client.put_object.assert_not_called()

    stream.close()
    stream.close()

    client.put_object.assert_called_once_with(
        Bucket="bucket", Key="a/b.txt", Body=b"hello world", ContentLength=11
    )


def test_stream_uploads_empty_object() -> None:
    client = MagicMock()
    with BufferedUploadStream(client, "bucket", "empty").open():
        pass
    client.put_object.assert_called_once_with(
        Bucket="bucket", Key="empty", Body=b"", ContentLength=0
    )


def test_write_after_close_raises() -> None:
    stream = BufferedUploadStream(MagicMock(), "bucket", "k").open()
    stream.close()
    assert stream.closed
    assert not stream.writable()
    with pytest.raises(ValueError):
        stream.write(b"late")


def test_write_rejects_text() -> None:
    stream = BufferedUploadStream(MagicMock(), "bucket", "k").open()
    with pytest.raises(TypeError):
        stream.write("text")


def test_context_manager_flushes_on_error() -> None:
    client = MagicMock()
    with pytest.raises(RuntimeError):
        with BufferedUploadStream(client, "bucket", "k").open() as stream:
            stream.write(b"partial")
            raise RuntimeError("boom")
    client.put_object.assert_called_once()


def test_open_twice_is_an_error() -> None:
    stream = BufferedUploadStream(MagicMock(), "bucket", "k").open()
    with pytest.raises(ValueError):
        stream.open()


def test_append_preseeds_existing_content() -> None:
    client = FakeS3Client()
    client.seed("bucket", "log.txt", b"first\n")

    with BufferedUploadStream(client, "bucket", "log.txt", append=True).open() as stream:
        assert stream.size == len(b"first\n")
        stream.write(b"second\n")

    assert client.read("bucket", "log.txt") == b"first\nsecond\n"


def test_append_through_with_block_preseeds_existing_content() -> None:
    client = FakeS3Client()
    client.seed("bucket", "log.txt", b"first\n")

    with BufferedUploadStream(client, "bucket", "log.txt", append=True) as stream:
        stream.write(b"second\n")

    assert client.read("bucket", "log.txt") == b"first\nsecond\n"


def test_append_to_missing_object_creates_it() -> None:
    client = FakeS3Client()

    with BufferedUploadStream(client, "bucket", "new.txt", append=True).open() as stream:
        stream.write(b"data")

    assert client.read("bucket", "new.txt") == b"data"


def test_append_read_failure_propagates_without_upload() -> None:
    client = MagicMock()
    client.get_object.side_effect = _client_error("AccessDenied")
    stream = BufferedUploadStream(client, "bucket", "k", append=True)

    with pytest.raises(ClientError):
        stream.open()
    client.put_object.assert_not_called()


@pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
def test_is_missing_object_codes(code) -> None:
    assert is_missing_object(_client_error(code))


def test_is_missing_object_other_errors() -> None:
    assert not is_missing_object(_client_error("AccessDenied"))
    assert not is_missing_object(RuntimeError("boom"))


def test_object_io_modes() -> None:
    client = FakeS3Client()
    object_io = S3ObjectIO(client, "bucket", "k")

    with object_io.open("wb") as writer:
        writer.write(b"abc")
    with object_io.open("ab") as writer:
        writer.write(b"def")
    with object_io.open("rb") as reader:
        assert reader.read() == b"abcdef"

    with pytest.raises(ValueError):
        object_io.open("r+")
