import io

import pytest

from urlsort.adapters.line_sink_fs import FileSystemLineSink, LineSinkError
from urlsort.adapters.line_source_fs import FileSystemLineSource, LineSourceError, split_lines


@pytest.mark.parametrize(
    "payload,expected",
    [
        (b"", []),
        (b"\n", [""]),
        (b"a\nb", ["a", "b"]),
        (b"a\nb\n", ["a", "b"]),
        (b"a\n\nb\n", ["a", "", "b"]),
        (b"a\r\nb \n", ["a\r", "b "]),
    ],
)
def test_split_lines(payload, expected) -> None:
    assert split_lines(payload) == expected


def test_source_reads_stdin_without_paths() -> None:
    source = FileSystemLineSource(stdin=io.BytesIO(b"https://z.com\nhttp://a.com\n"))
    assert source.read_lines() == ["https://z.com", "http://a.com"]


def test_source_concatenates_files_and_stdin_in_order(tmp_path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_bytes(b"https://z.com\nhttp://a.com")
    second.write_bytes(b"https://m.com\n")

    source = FileSystemLineSource(
        stdin=io.BytesIO(b"http://stdin.example\n"),
        paths=[str(first), "-", str(second)],
    )

    assert source.read_lines() == [
        "https://z.com",
        "http://a.com",
        "http://stdin.example",
        "https://m.com",
    ]


def test_source_raises_for_unreadable_file(tmp_path) -> None:
    missing = tmp_path / "missing.txt"
    source = FileSystemLineSource(stdin=io.BytesIO(b""), paths=[str(missing)])

    with pytest.raises(LineSourceError) as exc:
        source.read_lines()

    assert exc.value.path == str(missing)
    assert str(missing) in str(exc.value)


def test_undecodable_bytes_round_trip(tmp_path) -> None:
    raw = b"http://example.com/\xff\xfe\n"
    lines = FileSystemLineSource(stdin=io.BytesIO(raw)).read_lines()
    out = io.BytesIO()

    FileSystemLineSink(stdout=out).write_lines(lines)

    assert out.getvalue() == raw


def test_sink_writes_file(tmp_path) -> None:
    target = tmp_path / "out.txt"
    stdout = io.BytesIO()

    FileSystemLineSink(stdout=stdout, path=str(target)).write_lines(["http://a.com", "", "https://z.com"])

    assert target.read_bytes() == b"http://a.com\n\nhttps://z.com\n"
    assert stdout.getvalue() == b""


def test_sink_raises_for_unwritable_destination(tmp_path) -> None:
    target = tmp_path / "missing-dir" / "out.txt"

    with pytest.raises(LineSinkError) as exc:
        FileSystemLineSink(stdout=io.BytesIO(), path=str(target)).write_lines(["http://a.com"])

    assert exc.value.path == str(target)


class FailingStream:
    def __init__(self, fail_on: str) -> None:
        self.fail_on = fail_on

    def write(self, payload: bytes) -> int:
        if self.fail_on == "write":
            raise OSError(28, "No space left on device")
        return len(payload)

    def flush(self) -> None:
        if self.fail_on == "flush":
            raise BrokenPipeError(32, "Broken pipe")


@pytest.mark.parametrize("fail_on", ["write", "flush"])
def test_sink_raises_for_unwritable_stdout(fail_on) -> None:
    with pytest.raises(LineSinkError) as exc:
        FileSystemLineSink(stdout=FailingStream(fail_on)).write_lines(["http://a.com"])

    assert exc.value.path == "<stdout>"
    assert "Error writing output" in str(exc.value)
