"""Reading Markdown sources and writing generated output."""

from __future__ import annotations

from pathlib import Path


def read_text_file(path: Path) -> str:
    """Read a whole file as UTF-8 text.

    Raises:
        OSError: The file is missing or unreadable.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    return Path(path).read_text(encoding="utf-8")


def write_text_file(path: Path, content: str) -> Path:
    """Create or truncate a file and write the content in one pass.

    The file is written in place rather than through a temporary sibling: the
    output directory may be the watched directory, and a stray temporary file
    would show up there as an unsupported write.

    Args:
        path: Destination file.
        content: Text to write.

    Returns:
        The destination path.

    Raises:
        OSError: The destination is not writable.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(content)
    return path
