#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn source
text into the md2styled node tree.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2styled.ast import Document
from md2styled.exceptions import InvalidOptionsError, ParsingError
from md2styled.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

# Strings longer than this, or containing newlines, are never treated as paths
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: Source text, or a path to a file holding it
    - Path: File path to read
    - IO: File-like object in binary or text mode
    - bytes: Raw UTF-8 source

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Source to parse

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        ParsingError
            If the input cannot be read or tokenized

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Input data to load

        Returns
        -------
        str
            Source text

        Raises
        ------
        ParsingError
            If bytes are not valid UTF-8 or a file cannot be read

        """
        try:
            if isinstance(input_data, bytes):
                return input_data.decode("utf-8-sig")
            if isinstance(input_data, Path):
                return input_data.read_bytes().decode("utf-8-sig")
            if isinstance(input_data, str):
                if len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
                    try:
                        path = Path(input_data)
                        if path.is_file():
                            logger.debug("Reading source from file %s", path)
                            return path.read_bytes().decode("utf-8-sig")
                    except OSError:
                        # Invalid as a path, so it is content
                        pass
                return input_data

            data = input_data.read()
            if isinstance(data, bytes):
                return data.decode("utf-8-sig")
            return data
        except UnicodeDecodeError as exc:
            raise ParsingError("Input is not valid UTF-8 text", parsing_stage="loading", original_error=exc) from exc
        except OSError as exc:
            raise ParsingError(f"Could not read input: {exc}", parsing_stage="loading", original_error=exc) from exc
