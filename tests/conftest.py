from typing import Iterable, Tuple

import pytest


def farbfeld_bytes(width: int, height: int, records: Iterable[Tuple[int, int, int, int]]) -> bytes:
    data = bytearray(b"farbfeld")
    data += width.to_bytes(4, "big") + height.to_bytes(4, "big")
    for record in records:
        for channel in record:
            data += channel.to_bytes(2, "big")
    return bytes(data)


@pytest.fixture
def make_farbfeld():
    return farbfeld_bytes
