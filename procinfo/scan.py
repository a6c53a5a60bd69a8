"""
procinfo.scan
AUTHOR: carter-vin

Line-oriented key/value scanning shared by the pseudo-file parsers

Contract:
- one record per line, split on the FIRST separator
- lines without a separator are skipped
- value is whitespace-trimmed; key is verbatim unless trim_key
- the stream belongs to the caller and is never closed here
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from procinfo.errors import StreamReadError

Line = Union[bytes, str]


def _decode(raw: Line) -> str:
    if isinstance(raw, bytes):
        # Replace invalid bytes; keys we care about are ASCII
        return raw.decode("utf-8", errors="replace")
    return raw


def iter_key_values(
    stream: Iterable[Line],
    separator: str = ":",
    *,
    trim_key: bool = False,
) -> Iterator[tuple[str, str]]:
    """
    Yield (key, value) pairs from a stream of lines

    Accepts binary or text file objects (or any iterable of lines).
    An OSError raised by the stream surfaces as StreamReadError.
    """
    lines = iter(stream)
    while True:
        try:
            raw = next(lines)
        except StopIteration:
            return
        except OSError as e:
            raise StreamReadError(e) from e

        line = _decode(raw).rstrip("\n").rstrip("\r")
        key, found, value = line.partition(separator)
        if not found:
            continue

        if trim_key:
            key = key.strip()
        yield key, value.strip()
