"""Tests for the shard writer."""

import io

import pytest

from csvpart.errors import ShardWriteError
from csvpart.split import write
from csvpart.split.write import read_raw_lines, remove_files, write_shards


def make_source(tmp_path, content: bytes):
    path = tmp_path / "source.csv"
    path.write_bytes(content)
    return path


class TestWriteShards:
    """Test cases for write_shards."""

    def test_copies_headers_and_lines_in_order(self, tmp_path) -> None:
        source = make_source(tmp_path, b"id,name\n1,a\n2,b\n3,c\n4,d\n5,e\n")
        paths = [tmp_path / "0_source.csv", tmp_path / "1_source.csv"]

        written = write_shards(source, 1, [2, 3], paths)

        assert written == paths
        assert paths[0].read_bytes() == b"id,name\n1,a\n2,b\n"
        assert paths[1].read_bytes() == b"id,name\n3,c\n4,d\n5,e\n"

    def test_preserves_raw_bytes(self, tmp_path) -> None:
        """Line terminators and non-UTF-8 bytes are copied verbatim."""
        source = make_source(tmp_path, b"h1\r\nh2\n\xff\xfe,x\r\nplain\n")
        paths = [tmp_path / "0_source.csv"]

        write_shards(source, 2, [2], paths)

        assert paths[0].read_bytes() == b"h1\r\nh2\n\xff\xfe,x\r\nplain\n"

    def test_zero_line_shard_gets_headers_only(self, tmp_path) -> None:
        source = make_source(tmp_path, b"h\n1\n")
        paths = [tmp_path / "0_source.csv", tmp_path / "1_source.csv"]

        write_shards(source, 1, [0, 1], paths)

        assert paths[0].read_bytes() == b"h\n"
        assert paths[1].read_bytes() == b"h\n1\n"

    def test_short_read_removes_created_shards(self, tmp_path) -> None:
        source = make_source(tmp_path, b"h\n1\n2\n3\n")
        paths = [tmp_path / "0_source.csv", tmp_path / "1_source.csv"]

        with pytest.raises(ShardWriteError):
            write_shards(source, 1, [2, 2], paths)

        assert not paths[0].exists()
        assert not paths[1].exists()

    def test_unterminated_final_line_is_not_copied(self, tmp_path) -> None:
        source = make_source(tmp_path, b"1\n2\n3")
        paths = [tmp_path / "0_source.csv"]

        with pytest.raises(ShardWriteError):
            write_shards(source, 0, [3], paths)

        assert not paths[0].exists()

    def test_create_failure_removes_earlier_shards(self, tmp_path) -> None:
        source = make_source(tmp_path, b"1\n2\n")
        paths = [tmp_path / "0_source.csv", tmp_path / "missing" / "1_source.csv"]

        with pytest.raises(OSError):
            write_shards(source, 0, [1, 1], paths)

        assert not paths[0].exists()

    def test_mismatched_lengths(self, tmp_path) -> None:
        source = make_source(tmp_path, b"1\n")
        with pytest.raises(ValueError):
            write_shards(source, 0, [1], [])


def test_read_raw_lines_exact_count() -> None:
    stream = io.BytesIO(b"a\nb\nc\n")
    assert list(read_raw_lines(stream, 2)) == [b"a\n", b"b\n"]
    assert stream.read() == b"c\n"


def test_remove_files_ignores_missing(tmp_path) -> None:
    present = tmp_path / "present.csv"
    present.write_bytes(b"x\n")

    remove_files([present, tmp_path / "absent.csv"])

    assert not present.exists()


def test_interrupt_removes_created_shards(tmp_path, monkeypatch) -> None:
    """Cleanup also runs for non-OSError failures such as KeyboardInterrupt."""
    source = make_source(tmp_path, b"h\n1\n2\n3\n4\n")
    paths = [tmp_path / "0_source.csv", tmp_path / "1_source.csv"]
    calls: list[int] = []
    original = write.read_raw_lines

    def interrupted(stream, count):
        # Header read, first shard, then interrupt inside the second shard.
        if len(calls) == 2:
            raise KeyboardInterrupt
        calls.append(count)
        yield from original(stream, count)

    monkeypatch.setattr(write, "read_raw_lines", interrupted)

    with pytest.raises(KeyboardInterrupt):
        write_shards(source, 1, [2, 2], paths)

    assert not paths[0].exists()
    assert not paths[1].exists()
