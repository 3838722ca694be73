"""Clean-reader proxy for single articles."""

from .client import ReaderClient, ReaderDocument
from .markdown import markdown_to_html, split_reader_document

__all__ = ["ReaderClient", "ReaderDocument", "markdown_to_html", "split_reader_document"]
