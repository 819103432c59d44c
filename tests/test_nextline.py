import io
import os

import pytest

from ftkit.nextline import BUFFER_SIZE, OPEN_MAX, LineReader, get_next_line, main

SAMPLE = b"first line\nsecond\n\nfourth without end"


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(SAMPLE)
    return path


def _open(path):
    return os.open(str(path), os.O_RDONLY)


@pytest.mark.parametrize("size", [1, 2, 3, 7, BUFFER_SIZE, 1000])
def test_reader_matches_splitlines(sample_path, size):
    fd = _open(sample_path)
    try:
        lines = list(LineReader(fd, size))
    finally:
        os.close(fd)
    assert lines == SAMPLE.splitlines(keepends=True)
    assert b"".join(lines) == SAMPLE


def test_reader_returns_none_after_end(sample_path):
    fd = _open(sample_path)
    try:
        reader = LineReader(fd, 4)
        while reader.read_line() is not None:
            pass
        assert reader.read_line() is None
    finally:
        os.close(fd)


def test_empty_file_gives_no_lines(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    fd = _open(path)
    try:
        assert LineReader(fd).read_line() is None
        assert get_next_line(fd) is None
    finally:
        os.close(fd)


def test_trailing_newline_does_not_add_empty_line():
    reader = LineReader(io.BytesIO(b"a\nb\n"), 1)
    assert list(reader) == [b"a\n", b"b\n"]


def test_reader_accepts_file_objects():
    data = b"one\ntwo\nthree"
    assert list(LineReader(io.BytesIO(data), 5)) == data.splitlines(keepends=True)


def test_lines_longer_than_buffer():
    data = b"x" * 500 + b"\n" + b"y" * 300
    lines = list(LineReader(io.BytesIO(data), 3))
    assert lines == [b"x" * 500 + b"\n", b"y" * 300]


@pytest.mark.parametrize("size", [0, -5])
def test_reader_rejects_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"a"), size)


def test_reader_rejects_negative_fd():
    with pytest.raises(ValueError):
        LineReader(-1)


def test_reader_rejects_unreadable_source():
    with pytest.raises(TypeError):
        LineReader("not a file")


def test_get_next_line_reads_whole_file(sample_path):
    fd = _open(sample_path)
    try:
        lines = []
        while (line := get_next_line(fd, 5)) is not None:
            lines.append(line)
    finally:
        os.close(fd)
    assert lines == SAMPLE.splitlines(keepends=True)


def test_get_next_line_keeps_separate_state_per_fd(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"a1\na2\na3\n")
    second.write_bytes(b"b1\nb2\n")
    fd_a = _open(first)
    fd_b = _open(second)
    try:
        got = [
            get_next_line(fd_a, 100),
            get_next_line(fd_b, 100),
            get_next_line(fd_a, 100),
            get_next_line(fd_b, 100),
            get_next_line(fd_a, 100),
            get_next_line(fd_b, 100),
            get_next_line(fd_a, 100),
        ]
    finally:
        os.close(fd_a)
        os.close(fd_b)
    assert got == [b"a1\n", b"b1\n", b"a2\n", b"b2\n", b"a3\n", None, None]


@pytest.mark.parametrize("fd", [-1, OPEN_MAX, OPEN_MAX + 10])
def test_get_next_line_rejects_out_of_range_fd(fd):
    with pytest.raises(ValueError):
        get_next_line(fd)


def test_get_next_line_rejects_bad_buffer_size():
    with pytest.raises(ValueError):
        get_next_line(0, 0)


def test_get_next_line_read_error(tmp_path):
    path = tmp_path / "closed.txt"
    path.write_bytes(b"data\n")
    fd = _open(path)
    os.close(fd)
    with pytest.raises(OSError):
        get_next_line(fd)


def test_main_prints_numbered_lines(tmp_path, capsys):
    path = tmp_path / "example.txt"
    path.write_bytes(b"alpha\nbeta\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == "line 1\n: alpha\nline 2\n: beta\n"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err