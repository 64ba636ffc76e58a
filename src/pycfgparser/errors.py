# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:05

"""Exceptions raised by the parsers, plus the reporter that decides
whether they are raised at all.

With `throw_exceptions` disabled in the parser settings, nothing in here
is raised: the message gets logged and the caller receives a sentinel.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

__all__ = [
    'ConfigParserError', 'DuplicateSectionError', 'InvalidArgumentError',
    'NoSectionError', 'NoOptionError', 'UnexpectedValueError', 'ParseError',
    'ReadError', 'WriteError', 'ConfigFileNotFoundError',
    'ErrorReporter'
]

S = TypeVar('S')


class ConfigParserError(Exception):
    """Base class of everything this package raises on purpose."""
    pass


class DuplicateSectionError(ConfigParserError):
    def __init__(self, section: str) -> None:
        super().__init__(f'Section "{section}" already exists')
        self.section = section


class InvalidArgumentError(ConfigParserError, ValueError):
    pass


class NoSectionError(ConfigParserError):
    def __init__(self, section: str) -> None:
        super().__init__(f'No section: "{section}"')
        self.section = section


class NoOptionError(ConfigParserError):
    def __init__(self, section: str | None, option: str) -> None:
        super().__init__(
            f'No option "{option}" in section: "{section or "<None>"}"')
        self.section = section
        self.option = option


class UnexpectedValueError(ConfigParserError, ValueError):
    pass


class ParseError(ConfigParserError):
    def __init__(self, message: str, lineno: int | None = None,
                 source: str | None = None) -> None:
        where = source or '<string>'
        if lineno is not None:
            where += f', line {lineno}'
        super().__init__(f'{message} ({where})')
        self.lineno = lineno
        self.source = source


class ReadError(ConfigParserError, OSError):
    pass


class WriteError(ConfigParserError, RuntimeError):
    pass


class ConfigFileNotFoundError(ConfigParserError, FileNotFoundError):
    pass


class ErrorReporter:
    """Raise or log, depending on `throw_exceptions`.

    The settings mapping is kept by reference, so flipping the flag on a
    live parser takes effect on the next failing call.
    """

    def __init__(self, settings: Mapping[str, Any]) -> None:
        self._settings = settings

    @property
    def throws(self) -> bool:
        # only an explicit `False` turns exceptions off
        return self._settings.get('throw_exceptions') is not False

    def report(self, error: ConfigParserError, sentinel: S = None) -> S:
        if self.throws:
            raise error
        logging.error(str(error))
        return sentinel
