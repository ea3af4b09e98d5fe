from pathlib import Path

from mdwatch.events import ConversionRequest, EventKind, WatchEvent


def test_output_path_uses_stem_in_output_dir(tmp_path):
    request = ConversionRequest.for_input(
        Path("notes/sub/note.md"), tmp_path / "out", Path("t.html")
    )
    assert request.output_path == tmp_path / "out" / "note.html"
    assert request.template_path == Path("t.html")


def test_output_path_only_replaces_final_suffix(tmp_path):
    request = ConversionRequest.for_input(Path("a.md.md"), tmp_path)
    assert request.output_path == tmp_path / "a.md.html"


def test_event_constructors():
    event = WatchEvent.write("x.md", timestamp=3.0)
    assert event.kind is EventKind.WRITE
    assert event.path == Path("x.md")
    assert event.timestamp == 3.0

    failure = WatchEvent.failure("boom")
    assert failure.kind is EventKind.ERROR
    assert failure.path is None
    assert failure.error == "boom"
