# -*- encoding: utf-8 -*-
# @File   : settings.py
# @Time   : 2024/10/12 22:03:17

"""Parser settings, i.e. how files are read and written.

Known keys:

- `delimiter`: between keys and values on output. Defaults to `=`.
- `space_around_delimiters`: pad the delimiter with blanks. Defaults to `True`.
- `linebreak`: line terminator on output. Defaults to `os.linesep`.
- `throw_exceptions`: raise on failure, or just log it. Defaults to `True`.
- `interpolation`: reserved, not implemented. Defaults to `False`.
- `save_comments`: keep comment lines of the last read file.
  Defaults to `True`.
- `encoding`: used to open files. Defaults to `utf-8`.
"""

import os
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

__all__ = ['DEFAULT_SETTINGS', 'Settings']

DEFAULT_SETTINGS: dict[str, Any] = {
    'delimiter': '=',
    'space_around_delimiters': True,
    'linebreak': os.linesep,
    'throw_exceptions': True,
    'interpolation': False,
    'save_comments': True,
    'encoding': 'utf-8',
}


class Settings(MutableMapping[str, Any]):
    """A flat key-to-value bag."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self.__raw: dict[str, Any] = {}
        if initial:
            self.add(initial)

    def __getitem__(self, key: str) -> Any:
        return self.__raw[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.__raw[key] = value

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return f'Settings({self.__raw!r})'

    def set(self, key: str, value: Any) -> None:
        self[key] = value

    def has(self, key: str) -> bool:
        return key in self

    def add(self, settings: Mapping[str, Any]) -> None:
        """Merge `settings` in, overriding keys already there."""
        self.update(settings)

    def all(self) -> dict[str, Any]:
        return self.__raw.copy()

    @classmethod
    def with_defaults(cls, overrides: Mapping[str, Any] | None = None):
        ret = cls(DEFAULT_SETTINGS)
        if overrides:
            ret.add(overrides)
        return ret
