# -*- encoding: utf-8 -*-
# @File   : parsers.py
# @Time   : 2024/10/13 15:47:20

"""The configuration parsers.

`ConfigParser` is for INIs with `[sections]`,
`NoSectionsConfigParser` for flat `key = value` files.
Both share one engine and only differ in:

- how files merge: a later file replaces *whole sections* of a sectioned
  config, but only the *options* it redefines of a flat one;
- whether accessors take a section name.

Failures follow the `throw_exceptions` setting: raise (default),
or log and give back `None`/`False`/`[]`.
"""

import logging
from abc import ABCMeta
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from math import isfinite
from os import PathLike
from re import compile as regex
from types import MappingProxyType
from typing import Any
from warnings import warn

from .errors import (
    ConfigFileNotFoundError, DuplicateSectionError, ErrorReporter,
    InvalidArgumentError, NoOptionError, NoSectionError, ParseError,
    ReadError, UnexpectedValueError, WriteError
)
from .files import IniFile
from .ini.model import (
    DEFAULT_SECTION, NO_SECTION, IniDocument, IniSection, is_default_section
)
from .ini.parser import parse, serialize
from .ini.sanitizer import sanitize
from .settings import Settings

__all__ = ['BaseConfigParser', 'ConfigParser', 'NoSectionsConfigParser']

StrPath = str | PathLike[str]

BOOLEAN_STATES: Mapping[str, bool] = MappingProxyType({
    '1': True, 'yes': True, 'true': True, 'on': True,
    '0': False, 'no': False, 'false': False, 'off': False,
})

# sign, digits, fraction, exponent. whatever follows is ignored.
_NUMERIC_PREFIX = regex(r'\s*([+-]?(?:\d+(\.\d*)?|(\.\d+))([eE][+-]?\d+)?)')


def _to_float(value: Any) -> float:
    """Permissive float coercion: `'2.5kg'` -> 2.5, `'abc'` -> 0.0."""
    if isinstance(value, (int, float)):
        return float(value)
    if value is None or not (m := _NUMERIC_PREFIX.match(str(value))):
        return 0.0
    return float(m[1])


def _to_int(value: Any) -> int:
    """Permissive int coercion: `'12abc'` -> 12, `'3.9'` -> 3, `'x'` -> 0.

    Non-numeric text never raises, it just becomes 0.
    """
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if isfinite(value) else 0
    if value is None or not (m := _NUMERIC_PREFIX.match(str(value))):
        return 0
    if m[2] is None and m[3] is None and m[4] is None:
        return int(m[1])
    number = float(m[1])
    return int(number) if isfinite(number) else 0


def _valid_section_name(name: object) -> bool:
    return (isinstance(name, str)
            and bool(name.strip())
            and name == name.strip()
            and not is_default_section(name)
            and not any(i in name for i in '];\r\n'))


class BaseConfigParser(MutableMapping[str, Any], metaclass=ABCMeta):
    """Engine shared by both parsers.

    As a mapping, a parser gives access to its top level: sections of
    a `ConfigParser`, options of a `NoSectionsConfigParser`.
    """

    HAS_SECTIONS = True

    def __init__(
        self,
        defaults: Mapping[str, Any] | None = None,
        settings: Mapping[str, Any] | None = None
    ) -> None:
        """
        Args:
            defaults: values `get()` falls back to, after the `fallback`
                argument. Read only afterwards.
            settings: overrides of `settings.DEFAULT_SETTINGS`.
        """
        self._defaults: Mapping[str, str] = MappingProxyType(
            {str(k): str(v) for k, v in (defaults or {}).items()})
        self.settings = Settings.with_defaults(settings)
        if self.settings.get('interpolation'):
            warn('Interpolation is not implemented, '
                 'values will be read as they are.')
        self._reporter = ErrorReporter(self.settings)
        self._document = IniDocument(self.HAS_SECTIONS)
        # comment lines of the last file read.
        self._comments: list[str] = []
        self._files: list[IniFile] = []

    # mapping protocol, over sections or options.
    @property
    def _namespace(self) -> MutableMapping[str, Any]:
        return self._document

    def __getitem__(self, key: str) -> Any:
        return self._namespace[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._namespace[key] = value

    def __delitem__(self, key: str) -> None:
        del self._namespace[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespace)

    def __len__(self) -> int:
        return len(self._namespace)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} files={self.loaded_files()!r}>'

    @property
    def document(self) -> IniDocument:
        """The live document; changes to it are changes to the parser."""
        return self._document

    def defaults(self) -> Mapping[str, str]:
        return self._defaults

    def comments(self) -> list[str]:
        """Comment lines kept from the last file read,
        if the `save_comments` setting is on."""
        return self._comments.copy()

    def loaded_files(self) -> list[str]:
        return [i.pathname for i in self._files]

    # reading
    def _open(self, filename: StrPath) -> IniFile:
        return IniFile(filename, self.settings.get('encoding'))

    def _parse(self, contents: str, source: str | None = None):
        try:
            return parse(sanitize(contents), self.HAS_SECTIONS, source)
        except ParseError as e:
            return self._reporter.report(e)

    def _read(
        self, file: IniFile, skip_unreadable: bool = False
    ) -> IniDocument | None:
        if not file.exists:
            return self._reporter.report(ConfigFileNotFoundError(
                f'File {file.pathname} does not exist.'))
        try:
            contents = file.read()
            comments = (file.read_comments()
                        if self.settings.get('save_comments') is True
                        else None)
        except (OSError, LookupError) as e:
            if skip_unreadable and isinstance(e, OSError):
                logging.debug(f'Skipping unreadable file {file.pathname}: {e}')
                return None
            error = ReadError(f'Unable to read {file.pathname}: {e}')
            error.__cause__ = e
            return self._reporter.report(error)
        parsed = self._parse(contents, file.pathname)
        if parsed is None:
            return None
        if comments is not None:
            self._comments = comments
        self._document.merge(parsed)
        return parsed

    def read(self, filenames: StrPath | Iterable[StrPath]) -> list[str]:
        """Attempt to read and parse a list of filenames, returning
        the ones successfully parsed.

        A single filename is fine as well. Files that don't exist or
        can't be read are just skipped, so that a list of potential
        locations (current directory, home, system wide, ...) can be
        given and every one existing gets read, in order.

        Files are merged as they come, see `IniDocument.merge()`.
        """
        if isinstance(filenames, (str, PathLike)):
            filenames = [filenames]
        read_ok = []
        for fn in filenames:
            file = self._open(fn)
            if not file.readable:
                logging.debug(f'Skipping unreadable file {file.pathname}')
                continue
            if self._read(file, skip_unreadable=True) is None:
                continue
            logging.debug(f'Loaded {file}')
            self._files.append(file)
            read_ok.append(file.pathname)
        return read_ok

    def read_file(self, filename: StrPath) -> bool:
        """Read a file that must be there.

        Unlike `read()`, a missing file is an error
        (`ConfigFileNotFoundError`).
        """
        file = self._open(filename)
        if self._read(file) is None:
            return False
        self._files.append(file)
        return True

    def read_string(self, string: str) -> None:
        """Replace the whole configuration with what `string` holds."""
        parsed = self._parse(string)
        if parsed is not None:
            self._document = parsed

    def read_dict(self, data: Mapping[str, Any]) -> None:
        """Replace the whole configuration with `data`,
        e.g. something `dump()` returned."""
        self._document = IniDocument.from_dict(data, self.HAS_SECTIONS)

    def reload(self) -> None:
        """Re-read configuration from all successfully parsed files."""
        for file in self._files:
            self._read(file)

    # writing
    def _build_output_string(self) -> str:
        return serialize(self._document, self.settings)

    def write(self, filename: StrPath) -> bool:
        """Write an INI representation of the configuration to `filename`.

        Raises `WriteError` if the file is not writable.
        """
        file = self._open(filename)
        if not file.writable:
            return self._reporter.report(WriteError(
                f'Unable to write configuration as file {file.pathname} '
                'is not writable'), False)
        try:
            file.write(self._build_output_string())
        except OSError as e:
            error = WriteError(
                f'Unable to write configuration as file {file.pathname} '
                f'could not be opened for writing: {e}')
            error.__cause__ = e
            return self._reporter.report(error, False)
        return True

    def save(self) -> bool:
        """Write the configuration to the last file successfully read."""
        if not self._files:
            return self._reporter.report(WriteError(
                'Unable to save configuration as no file was loaded'), False)
        return self.write(self._files[-1].pathname)

    def clear(self) -> None:
        """Removes all parsed data."""
        self._document.clear()

    def dump(self) -> dict[str, Any]:
        return self._document.to_dict()

    def output(self) -> None:
        """Prints the configuration as it would be written to a file."""
        print(self._build_output_string(), end='')

    # accessors, by section name. `NO_SECTION` for flat configs.
    def _options(self, section: str) -> list[str]:
        if section not in self._document:
            return self._reporter.report(NoSectionError(section), [])
        return list(self._document[section])

    def _has_option(self, section: str, option: str) -> bool:
        sect = self._document.get(section)
        return sect is not None and sect.has_value(option)

    def _fallback_default(self, option: str) -> str | None:
        return self._defaults.get(option)

    def _get(self, section: str, option: str, fallback: Any = None) -> Any:
        if self._has_option(section, option):
            return self._document[section][option]
        if fallback is not None:
            return fallback
        if (value := self._fallback_default(option)) is not None:
            return value
        return self._reporter.report(NoOptionError(
            section if self.HAS_SECTIONS else None, option))

    def _get_int(self, section: str, option: str, fallback: Any = None):
        return _to_int(self._get(section, option, fallback))

    def _get_float(self, section: str, option: str, fallback: Any = None):
        return _to_float(self._get(section, option, fallback))

    def _get_boolean(self, section: str, option: str, fallback: Any = None):
        value = self._get(section, option, fallback)
        if value is None and not self._reporter.throws:
            # already reported as a missing option
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            value = str(value)
        elif isinstance(value, str):
            value = value.lower()
        if isinstance(value, str) and value in BOOLEAN_STATES:
            return BOOLEAN_STATES[value]
        return self._reporter.report(UnexpectedValueError(
            f'Option "{option}" is not a boolean'))

    def _set(self, section: str, option: Any, value: Any) -> None:
        self._document[section][str(option)] = str(value)

    def _remove_option(self, section: str, option: str) -> bool:
        if section not in self._document:
            return self._reporter.report(NoSectionError(section), False)
        return self._document[section].remove(option)


class ConfigParser(BaseConfigParser):
    """Parser for INI files made of sections.

    `[DEFAULT]` (in any case) is not a section like the others:
    `has_section()` never sees it, `add_section()` refuses it, and its
    options serve as fallbacks for every other section.
    """

    HAS_SECTIONS = True

    @staticmethod
    def _section_name(section: str | None) -> str:
        if not section or is_default_section(section):
            return DEFAULT_SECTION
        return section

    def sections(self) -> list[str]:
        """List of section names, `[DEFAULT]` excluded."""
        return [i for i in self._document if i != DEFAULT_SECTION]

    def add_section(self, section: str) -> None:
        """Add a section named `section` to the instance.

        Raises `DuplicateSectionError` if it exists already, and
        `InvalidArgumentError` if the name is not a string, is the
        default section's one, or could not be read back from a file
        (blank, padded with blanks, or holding `]`, `;` or a linebreak).
        """
        if not _valid_section_name(section):
            return self._reporter.report(InvalidArgumentError(
                f'Invalid section name: {section!r}'))
        if section in self._document:
            return self._reporter.report(DuplicateSectionError(section))
        self._document[section] = {}

    def has_section(self, section: str) -> bool:
        """Whether `section` exists. `[DEFAULT]` is not acknowledged."""
        return (isinstance(section, str)
                and not is_default_section(section)
                and section in self._document)

    def remove_section(self, section: str) -> bool:
        """Returns `True` if the section existed and got removed."""
        if not self.has_section(section):
            return False
        del self._document[section]
        return True

    def options(self, section: str) -> list[str]:
        """Option names of `section`, valueless ones included."""
        return self._options(self._section_name(section))

    def has_option(self, section: str | None, option: str) -> bool:
        """If the given section exists and its `option` has a value.

        An empty or `None` section means `[DEFAULT]`.
        """
        return self._has_option(self._section_name(section), option)

    def _fallback_default(self, option: str) -> str | None:
        if self._has_option(DEFAULT_SECTION, option):
            return self._document[DEFAULT_SECTION][option]
        return super()._fallback_default(option)

    def get(self, section: str | None, option: str,  # type: ignore[override]
            fallback: Any = None) -> Any:
        """Get an option value of the named section.

        If the option isn't there, `fallback` is used; without `fallback`
        the `[DEFAULT]` section, then the parser `defaults`.
        If everything fails raise `NoOptionError`.
        """
        return self._get(self._section_name(section), option, fallback)

    def get_int(self, section: str | None, option: str,
                fallback: Any = None) -> int:
        """`get()`, coerced to an integer. Non-numeric text is 0."""
        return self._get_int(self._section_name(section), option, fallback)

    def get_float(self, section: str | None, option: str,
                  fallback: Any = None) -> float:
        """`get()`, coerced to a float. Non-numeric text is 0.0."""
        return self._get_float(self._section_name(section), option, fallback)

    def get_boolean(self, section: str | None, option: str,
                    fallback: Any = None) -> bool | None:
        """`get()`, coerced to a boolean.

        Accepted values are '1', 'yes', 'true' and 'on' for `True`,
        '0', 'no', 'false' and 'off' for `False`, in any case.
        Anything else raises `UnexpectedValueError`.
        """
        return self._get_boolean(
            self._section_name(section), option, fallback)

    def set(self, section: str | None, option: Any,
            value: Any) -> 'ConfigParser':
        """Set `option` of an existing section to `value`;
        otherwise raise `NoSectionError`.

        Option and value are both stored as strings.
        """
        name = self._section_name(section)
        if name == DEFAULT_SECTION:
            self._document.setdefault(DEFAULT_SECTION)
        elif name not in self._document:
            return self._reporter.report(NoSectionError(name), self)
        self._set(name, option, value)
        return self

    def remove_option(self, section: str | None, option: str) -> bool:
        return self._remove_option(self._section_name(section), option)


class NoSectionsConfigParser(BaseConfigParser):
    """Parser for configuration files that don't have sections."""

    HAS_SECTIONS = False

    @property
    def _namespace(self) -> IniSection:
        return self._document.options

    def options(self) -> list[str]:
        """Return a list of options available."""
        return self._options(NO_SECTION)

    def has_option(self, option: str) -> bool:
        return self._has_option(NO_SECTION, option)

    def get(self, option: str, fallback: Any = None) -> Any:  # type: ignore[override]
        """Get an option value.

        If the option doesn't exist `fallback` is used, then the parser
        `defaults`. If everything fails raise `NoOptionError`.
        """
        return self._get(NO_SECTION, option, fallback)

    def get_int(self, option: str, fallback: Any = None) -> int:
        return self._get_int(NO_SECTION, option, fallback)

    def get_float(self, option: str, fallback: Any = None) -> float:
        return self._get_float(NO_SECTION, option, fallback)

    def get_boolean(self, option: str, fallback: Any = None) -> bool | None:
        return self._get_boolean(NO_SECTION, option, fallback)

    def set(self, option: Any, value: Any) -> 'NoSectionsConfigParser':
        self._set(NO_SECTION, option, value)
        return self

    def remove_option(self, option: str) -> bool:
        return self._remove_option(NO_SECTION, option)
