from __future__ import annotations

import pytest

from s3_context.domain.models import ABSENT
from s3_context.errors import NotEmptyError
from s3_context.local import LocalContext

SPEC = {"type": "ticker", "name": "Bitstamp", "ts": 1555804800000}


def test_local_context_write_read_list(tmp_path, ticker_naming) -> None:
    context = LocalContext(tmp_path / "ctx", ticker_naming)

    with context.io(SPEC).output_stream() as stream:
        stream.write(b"abc")
    with context.io(SPEC).open("ab") as stream:
        stream.write(b"def")

    with context.io(SPEC).input_stream() as reader:
        assert reader.read() == b"abcdef"
    assert context.resolve(SPEC) == str(
        (tmp_path / "ctx" / "ticker" / "Bitstamp_2019-04-21.log").resolve()
    )
    assert list(context.list()) == [SPEC]
    assert context.info(SPEC).size == 6


def test_local_context_info_missing(tmp_path, ticker_naming) -> None:
    context = LocalContext(tmp_path, ticker_naming)
    assert context.info(SPEC) == ABSENT


def test_local_context_info_checks_hint_key(tmp_path, ticker_naming) -> None:
    context = LocalContext(tmp_path, ticker_naming)
    with context.io(SPEC).output_stream() as stream:
        stream.write(b"abc")
    entry = next(context.list_entries())

    assert context.info(SPEC, entry) == entry.info
    assert context.info({**SPEC, "name": "Other"}, entry) == ABSENT


def test_local_context_skips_empty_and_foreign_files(tmp_path, ticker_naming) -> None:
    context = LocalContext(tmp_path, ticker_naming)
    (tmp_path / "ticker").mkdir()
    (tmp_path / "ticker" / "Empty_2019-04-21.log").write_bytes(b"")
    (tmp_path / "README.md").write_text("hi", encoding="utf-8")

    assert list(context.list()) == []


def test_local_context_delete(tmp_path, ticker_naming) -> None:
    context = LocalContext(tmp_path / "ctx", ticker_naming)
    with context.io(SPEC).output_stream() as stream:
        stream.write(b"x")

    with pytest.raises(NotEmptyError):
        context.delete()

    context.delete(SPEC)
    context.delete(SPEC)
    context.delete()
    assert not (tmp_path / "ctx").exists()


def test_local_context_rejects_escaping_paths(tmp_path) -> None:
    class Escaping:
        def spec_to_path(self, spec):
            return ["..", "outside.txt"]

        def path_to_spec(self, path):
            return None

    context = LocalContext(tmp_path / "ctx", Escaping())
    with pytest.raises(ValueError, match="escapes"):
        context.io("anything")
