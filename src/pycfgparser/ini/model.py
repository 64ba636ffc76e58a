# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/13 01:20:36

"""
Basically INI Structure: a document of sections, a section of options.

Both containers are plain `MutableMapping`s, plus a small explicit
interface (`set`, `has`, `remove`, `iterate`, `size`) so that a document
and a section can be handled the same way.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, TypeVar

__all__ = [
    'NO_SECTION', 'DEFAULT_SECTION', 'is_default_section',
    'IniSection', 'IniDocument', 'merge'
]

# the implicit section of a document without sections.
NO_SECTION = ''
DEFAULT_SECTION = 'DEFAULT'


def is_default_section(name: object) -> bool:
    return isinstance(name, str) and name.lower() == DEFAULT_SECTION.lower()


V = TypeVar('V')


class _Container(MutableMapping[str, V]):
    def set(self, key: str, value: V) -> None:
        self[key] = value

    def has(self, key: str) -> bool:
        return key in self

    def remove(self, key: str) -> bool:
        """Returns `True` if `key` was there and got removed."""
        if key not in self:
            return False
        del self[key]
        return True

    def iterate(self) -> list[tuple[str, V]]:
        return list(self.items())

    def size(self) -> int:
        return len(self)


class IniSection(_Container[str | None]):
    """... is a dict, just maintaining pairs of a section.

    Values are always `str`, except `None` for keys declared
    without any value (`key_without_value` alone in a line).
    Whatever else gets assigned is converted by `str()`.
    """

    def __init__(
        self, name: str = NO_SECTION,
        pairs: Mapping[str, Any] | None = None
    ) -> None:
        self._name = name
        self.__raw: dict[str, str | None] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str | None:
        return self.__raw[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.__raw[str(key)] = None if value is None else str(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__raw))

    def has_value(self, key: str) -> bool:
        """`key` exists *and* was given a value (may be empty)."""
        return self.__raw.get(key) is not None

    def copy(self, name: str | None = None) -> 'IniSection':
        return IniSection(self._name if name is None else name, self.__raw)

    def to_dict(self) -> dict[str, str | None]:
        return self.__raw.copy()


class IniDocument(_Container[IniSection]):
    """INI document representation, with or without sections:

        ```ini
        key = val  ; only valid without sections

        [section]
        key233 = val666
        key_without_value
        ```

    A document without sections keeps its options in one implicit
    section named `NO_SECTION`; see `self.options`.
    """

    def __init__(self, has_sections: bool = True) -> None:
        self.__has_sections = has_sections
        self.__raw: dict[str, IniSection] = {}
        if not has_sections:
            self.__raw[NO_SECTION] = IniSection(NO_SECTION)

    @property
    def has_sections(self) -> bool:
        return self.__has_sections

    def _section_key(self, key: str) -> str:
        if self.__has_sections and is_default_section(key):
            return DEFAULT_SECTION
        return key

    @property
    def options(self) -> IniSection:
        """The implicit section of a document without sections."""
        return self.setdefault(NO_SECTION)

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, Any]
    ) -> None:
        key = self._section_key(key)
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = (
            value.copy(key) if isinstance(value, IniSection)
            else IniSection(key, value)
        )

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'IniDocument(%s)' % ', '.join(repr(i) for i in self.values())

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, Any] | None = None
    ) -> IniSection:
        """If `key` not in self, then add it (empty, or from `default`).
        Either way returns the section."""
        key = self._section_key(key)
        if key not in self.__raw:
            self[key] = default or {}
        return self.__raw[key]

    def clear(self) -> None:
        self.__raw.clear()
        if not self.__has_sections:
            self.__raw[NO_SECTION] = IniSection(NO_SECTION)

    def merge(self, another: 'IniDocument') -> 'IniDocument':
        """To merge `another` into self.

        With sections, a section of `another` replaces the whole section
        of the same name here. Without sections, options are merged one
        by one, and options `another` doesn't have are kept.
        """
        if self.__has_sections:
            for decl, data in another.items():
                self[decl] = data
        else:
            for decl, data in another.items():
                self.setdefault(decl).update(data)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Plain (nested, when sectioned) dict copy of the document."""
        if not self.__has_sections:
            return self.options.to_dict()
        return {k: v.to_dict() for k, v in self.__raw.items()}

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], has_sections: bool = True
    ) -> 'IniDocument':
        ret = cls(has_sections)
        if has_sections:
            for decl, pairs in data.items():
                ret[str(decl)] = pairs
        else:
            ret.options.update(data)
        return ret


def merge(into: IniDocument, another: IniDocument) -> IniDocument:
    return into.merge(another)
