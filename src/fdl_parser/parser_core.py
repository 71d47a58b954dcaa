"""
parser_core.py
Central parsing engine with logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from fdl_parser.config import FDLConfig, ParserOptions, get_config
from fdl_parser.core.exceptions import FDLError
from fdl_parser.loader.builder import build_document
from fdl_parser.loader.classifier import classify_text
from fdl_parser.loader.file_loader import load_text
from fdl_parser.logging import get_logger
from fdl_parser.models import Document


class FDLParser:
    """
    High-level parser:
      - loads file (optional)
      - classifies lines
      - builds the immutable Document
    """

    def __init__(self, config: Optional[FDLConfig] = None):
        self.cfg = config if config is not None else get_config()
        self.options: ParserOptions = self.cfg.parser_options
        self.log = get_logger("parser_core")

        if self.cfg.debug:
            self.log.debug("Parser options: %s", self.options)

    # ---------------------------------------------------------
    # Text input
    # ---------------------------------------------------------
    def parse(self, text: str, source: Optional[Path] = None) -> Document:
        """Parse FDL text into a Document; raises FDLError on the first problem."""
        try:
            document = build_document(
                classify_text(text, self.options),
                options=self.options,
                source=source,
            )
        except FDLError as exc:
            self.log.error("Parse failed%s: %s", f" for {source}" if source else "", exc)
            raise

        self.log.debug("Parsed %d section(s)", len(document))
        return document

    # ---------------------------------------------------------
    # File input
    # ---------------------------------------------------------
    def parse_file(self, path: Union[str, Path]) -> Document:
        """Read ``path`` with the file loader, then parse it."""
        file_path = Path(path)
        self.log.info("Parsing FDL file: %s", file_path)
        try:
            text = load_text(file_path, encoding=self.options.encoding)
        except FDLError as exc:
            self.log.error("%s", exc)
            raise
        return self.parse(text, source=file_path)


def parse(text: str, config: Optional[FDLConfig] = None) -> Document:
    return FDLParser(config).parse(text)


def parse_file(path: Union[str, Path], config: Optional[FDLConfig] = None) -> Document:
    return FDLParser(config).parse_file(path)


def fetch(document: Document, section: str, key: str) -> Optional[str]:
    """Value of ``key`` in ``section``, or None when either is missing."""
    return document.fetch(section, key)
