# -*- encoding: utf-8 -*-
# @File   : files.py
# @Time   : 2024/10/13 00:12:44

"""File handles used by the parsers.

An `IniFile` only keeps its path and codec around. Every `read()` and
`write()` opens and closes the file again.
"""

import os
from io import StringIO
from os import PathLike
from os.path import dirname, isfile

import chardet

from .abstract import FileHandler

__all__ = ['IniFile']


class IniFile(FileHandler[str]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = 'utf-8'
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @property
    def exists(self) -> bool:
        return isfile(self._fn)

    @property
    def readable(self) -> bool:
        return self.exists and os.access(self._fn, os.R_OK)

    @property
    def writable(self) -> bool:
        if self.exists:
            return os.access(self._fn, os.W_OK)
        # a new file needs a writable parent directory
        parent = dirname(self._fn) or os.curdir
        return os.access(parent, os.W_OK)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf)

    def read(self) -> str:
        """Read the whole file as text.

        May raise `OSError`.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                return fp.read()
        except UnicodeDecodeError:
            return self._decode_file(self._fn).getvalue()

    def read_comments(self) -> list[str]:
        """Lines of the file that are comments, i.e. start with `;`."""
        return [
            i.rstrip('\r\n') for i in StringIO(self.read(), newline='')
            if i.strip().startswith(';')
        ]

    def write(self, instance: str) -> None:
        """Replace the file contents with `instance`.

        Line endings are written untouched. May raise `OSError`.
        """
        with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
            fp.write(instance)

    def __str__(self) -> str:
        return super().__str__() + f' ({self._codec})'

    def __repr__(self) -> str:
        return f'IniFile({self._fn!r}, encoding={self._codec!r})'
