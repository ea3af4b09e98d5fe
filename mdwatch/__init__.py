"""mdwatch: Markdown to HTML directory watcher.

This package watches a directory for saved Markdown files and converts each one
into an HTML file, optionally wrapped in a Jinja2 template.

The main entry point is the CLI module. The pieces can also be embedded:
- converter: Markdown text to HTML text.
- templates: optional template stage binding the ``html`` variable.
- files: reading sources and writing outputs.
- session: the watch loop that ties them together.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
