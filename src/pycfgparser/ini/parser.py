# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 02:11:08

"""Text <-> `IniDocument`.

`parse()` expects text that already went through `sanitizer.sanitize()`,
so `=` is the only delimiter it knows and `;` starts a comment.
It does raw scanning: values are kept as they are written,
`false` is the string `'false'`, not a bool nor an empty string.

`serialize()` writes the canonical form back, always quoting values:

    ```ini
    [section]
    key = "value"
    key_without_value
    ```
"""

from collections.abc import Mapping
from io import StringIO
from typing import Any

from ..errors import ParseError
from .model import DEFAULT_SECTION, IniDocument, IniSection, is_default_section

__all__ = ['parse', 'serialize', 'format_option']


def parse(
    contents: str, has_sections: bool = True, source: str | None = None
) -> IniDocument:
    """Parse sanitized `contents`.

    `source` only shows up in `ParseError` messages.
    """
    ret = IniDocument(has_sections)
    buf = StringIO(contents, newline=None)
    this_sect: IniSection | None = None if has_sections else ret.options
    lineno = 0
    while i := buf.readline():
        lineno += 1
        # inline comments run to the end of line.
        i = i.split(';', 1)[0].strip()
        if not i or i[0] == '#':
            continue
        if i[0] == '[':
            if not has_sections:
                # headers mean nothing here, all options go together.
                continue
            end = i.find(']')
            if end < 0:
                raise ParseError(
                    f'Unterminated section header "{i}"', lineno, source)
            decl = i[1:end].strip()
            if not decl:
                raise ParseError('Empty section name', lineno, source)
            if is_default_section(decl):
                decl = DEFAULT_SECTION
            # a repeated header reopens the same section.
            this_sect = ret.setdefault(decl)
            continue
        if this_sect is None:
            raise ParseError(
                f'Option "{i}" outside of any section', lineno, source)
        if '=' in i:
            key, val = i.split('=', 1)
            key = key.strip()
            if not key:
                raise ParseError(f'Missing option name in "{i}"',
                                 lineno, source)
            this_sect[key] = val.strip()
        else:
            # present, but without value
            this_sect[i] = None
    return ret


def format_option(
    key: str, value: str | None, settings: Mapping[str, Any]
) -> str:
    if value is None:
        return key
    delimiter = settings.get('delimiter', '=')
    spaced = settings.get('space_around_delimiters', True)
    line = key
    # no space before a colon, "key: value" is how it's usually written.
    if spaced and delimiter != ':':
        line += ' '
    line += delimiter
    if spaced:
        line += ' '
    return line + f'"{value}"'


def serialize(doc: IniDocument, settings: Mapping[str, Any]) -> str:
    """Canonical text of `doc`.

    No blank lines are put between sections.
    """
    linebreak = settings.get('linebreak', '\n')
    ret = StringIO()
    if not doc.has_sections:
        for k, v in doc.options.items():
            ret.write(format_option(k, v, settings) + linebreak)
        return ret.getvalue()
    for sect, data in doc.items():
        ret.write(f'[{sect}]{linebreak}')
        for k, v in data.items():
            ret.write(format_option(k, v, settings) + linebreak)
    return ret.getvalue()
