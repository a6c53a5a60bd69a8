"""
Contract tests for the shared key/value line scanner
"""

import io

import pytest

from procinfo.errors import StreamReadError
from procinfo.scan import iter_key_values


class _FailingStream:
    """Yields one good line, then fails like a broken read"""

    def __init__(self) -> None:
        self.closed = False

    def __iter__(self):
        yield b"MemTotal: 1 kB\n"
        raise OSError("device went away")

    def close(self) -> None:
        self.closed = True


def test_splits_on_first_separator_and_trims_value() -> None:
    stream = io.BytesIO(b"Key:  a:b  \nOther:\t7 kB\n")

    assert list(iter_key_values(stream)) == [("Key", "a:b"), ("Other", "7 kB")]


def test_lines_without_separator_are_skipped() -> None:
    stream = io.BytesIO(b"no separator here\n\nMemFree: 3\n")

    assert list(iter_key_values(stream)) == [("MemFree", "3")]


def test_final_unterminated_line_is_processed() -> None:
    stream = io.BytesIO(b"A: 1\r\nB: 2")

    assert list(iter_key_values(stream)) == [("A", "1"), ("B", "2")]


def test_key_is_verbatim_unless_trimmed() -> None:
    """
    Memory keys are taken as-is; status keys may be trimmed
    """
    content = b" Seccomp :\t2\n"

    assert list(iter_key_values(io.BytesIO(content))) == [(" Seccomp ", "2")]
    assert list(iter_key_values(io.BytesIO(content), trim_key=True)) == [("Seccomp", "2")]


def test_accepts_text_lines() -> None:
    assert list(iter_key_values(["A=1\n", "B=2\n"], "=")) == [("A", "1"), ("B", "2")]


def test_stream_failure_is_stream_read_error_and_stream_stays_open() -> None:
    stream = _FailingStream()

    with pytest.raises(StreamReadError) as excinfo:
        list(iter_key_values(stream))

    assert isinstance(excinfo.value.cause, OSError)
    assert isinstance(excinfo.value, OSError)
    assert not stream.closed
