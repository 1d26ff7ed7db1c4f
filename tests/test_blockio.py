import io

import pytest

from carcinusdb.blockio import (
    BlockIO,
    create_file,
    open_file,
    remove_file,
    sync_file,
    truncate_file,
)


def test_pages_at_least_block_size_round_trip():
    stream = io.BytesIO()
    block = BlockIO(stream, block_size=4, page_size=8)
    assert block.write(0, b"A" * 8) == 8
    assert block.write(1, b"B" * 8) == 8
    assert block.read(1) == b"B" * 8
    assert block.read(0) == b"A" * 8
    assert stream.getvalue() == b"A" * 8 + b"B" * 8


def test_read_past_end_with_large_pages():
    block = BlockIO(io.BytesIO(b"x" * 8), block_size=8, page_size=8)
    assert block.read(3) == b""


def test_pages_smaller_than_block_round_trip():
    stream = io.BytesIO()
    block = BlockIO(stream, block_size=16, page_size=4)
    pages = [bytes([n]) * 4 for n in range(1, 7)]
    for number, page in enumerate(pages):
        block.write(number, page)
    for number, page in enumerate(pages):
        assert block.read(number) == page
    assert stream.getvalue() == b"".join(pages)


def test_read_past_end_with_small_pages_is_zero_filled():
    block = BlockIO(io.BytesIO(b"y" * 4), block_size=16, page_size=4)
    assert block.read(0) == b"y" * 4
    assert block.read(2) == b"\0" * 4
    assert block.read(10) == b"\0" * 4


def test_write_overwrites_in_place():
    stream = io.BytesIO(b"a" * 12)
    block = BlockIO(stream, block_size=4, page_size=4)
    block.write(1, b"ZZZZ")
    assert stream.getvalue() == b"aaaaZZZZaaaa"


def test_create_file_makes_parents_and_truncates(tmp_path):
    path = tmp_path / "nested" / "dir" / "db"
    with create_file(path) as f:
        f.write(b"contents")
    assert path.read_bytes() == b"contents"
    with create_file(path) as f:
        assert f.read() == b""
    assert path.stat().st_size == 0


def test_open_file_is_read_only(tmp_path):
    path = tmp_path / "db"
    path.write_bytes(b"abc")
    with open_file(path) as f:
        assert f.read() == b"abc"
        with pytest.raises(io.UnsupportedOperation):
            f.write(b"x")


def test_open_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_file(tmp_path / "missing")


def test_truncate_file(tmp_path):
    path = tmp_path / "db"
    with create_file(path) as f:
        f.write(b"abcdef")
        truncate_file(f)
    assert path.stat().st_size == 0


def test_remove_file(tmp_path):
    path = tmp_path / "db"
    path.write_bytes(b"x")
    remove_file(path)
    assert not path.exists()
    with pytest.raises(FileNotFoundError):
        remove_file(path)


def test_sync_and_flush_on_real_file(tmp_path):
    path = tmp_path / "db"
    with create_file(path) as f:
        block = BlockIO(f, block_size=4, page_size=4)
        block.write(2, b"DATA")
        block.flush()
        block.sync()
        sync_file(f)
        assert path.read_bytes() == b"\0" * 8 + b"DATA"


def test_sync_requires_real_file():
    block = BlockIO(io.BytesIO(), block_size=4, page_size=4)
    with pytest.raises(io.UnsupportedOperation):
        block.sync()