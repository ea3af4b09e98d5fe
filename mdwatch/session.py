"""Watch loop for mdwatch.

Receives change notifications for the input directory, filters them, and
converts saved Markdown files into HTML in the output directory.

Key class:
- WatchSession: One watch subscription with an explicit start/stop lifecycle.

Dispatch rules for a write event:
- ``.md`` files are converted and a confirmation line is printed.
- ``.html`` files are ignored, so generated output landing in the watched
  directory does not cause errors.
- Anything else, including files without an extension, raises
  UnsupportedFileError (or is logged and skipped with ``on_unsupported="skip"``).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import WatchConfig
from .converter import render_markdown
from .errors import UnsupportedFileError
from .events import ConversionRequest, EventKind, WatchEvent
from .files import read_text_file, write_text_file
from .protocols import EventSource
from .sources import WatchdogEventSource
from .templates import TemplateRenderer

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = "md"
IGNORED_EXTENSIONS = frozenset({"html"})


class WatchSession:
    """Converts Markdown files as they are saved.

    Attributes:
        config: Session settings.
        source: Event source feeding the loop.
        renderer: Template stage checked when the session starts.
    """

    def __init__(self, config: WatchConfig, source: EventSource | None = None):
        self.config = config
        self.source = source if source is not None else WatchdogEventSource(config.debounce)
        self.renderer = TemplateRenderer(config.template_path)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Validate the configuration and subscribe to the input directory.

        Raises:
            InvalidDirectoryError: Input or output is not a directory.
            TemplateLoadError: The configured template cannot be loaded.
        """
        self.config.validate()
        self.renderer.validate()
        self.source.start(self.config.input_dir)
        self._running = True
        logger.info(
            "Watching %s, writing HTML to %s", self.config.input_dir, self.config.output_dir
        )

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self.source.stop()

    def run(self) -> None:
        """Run the loop until the source ends or a fatal error propagates."""
        self.start()
        stream = self.source.events()
        try:
            for event in stream:
                self.dispatch(event)
        except BaseException:
            close = getattr(stream, "close", None)
            if close is not None:
                close()
            self.stop()
            raise
        # The stream only ends after the source was stopped.
        self._running = False

    def dispatch(self, event: WatchEvent) -> Path | None:
        """Handle one event.

        Args:
            event: Debounced change notification.

        Returns:
            Path of the generated HTML file, or None when nothing was written.

        Raises:
            UnsupportedFileError: A non-Markdown file was written.
            OSError: Reading the source or writing the output failed.
            TemplateLoadError: The template could not be loaded.
        """
        if event.kind is EventKind.ERROR:
            logger.error("FILE WATCH ERROR: %s", event.error)
            return None
        if event.kind is not EventKind.WRITE:
            logger.debug("Ignoring %s event for %s", event.kind.value, event.path)
            return None

        input_path = Path(event.path)
        extension = input_path.suffix[1:]
        if not extension:
            return self._unsupported(input_path, "Not found extension.")
        if extension in IGNORED_EXTENSIONS:
            return None
        if extension != MARKDOWN_EXTENSION:
            return self._unsupported(input_path, "Only markdown files can be converted.")

        request = ConversionRequest.for_input(
            input_path, self.config.output_dir, self.config.template_path
        )
        output_path = self.convert(request).resolve()
        click.echo(f"Generated {output_path} from {input_path}")
        return output_path

    def convert(self, request: ConversionRequest) -> Path:
        """Read, convert, render and write one file.

        Args:
            request: Source and destination of the conversion.

        Returns:
            The written output path.
        """
        markdown = read_text_file(request.input_path)
        html = render_markdown(markdown)
        page = TemplateRenderer(request.template_path).render(html)
        return write_text_file(request.output_path, page)

    def _unsupported(self, path: Path, message: str) -> None:
        if self.config.on_unsupported == "skip":
            logger.warning("Skipping %s: %s", path, message)
            return None
        raise UnsupportedFileError(path, message)
