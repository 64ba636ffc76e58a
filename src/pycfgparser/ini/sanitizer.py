# -*- encoding: utf-8 -*-
# @File   : sanitizer.py
# @Time   : 2024/10/13 01:02:51

"""Bring INI dialects down to what `parser.parse()` understands.

- `# comment` lines become `; comment`;
- `key: value` becomes `key = value`;
- double quotes are dropped (they come back on output).

Note the colon rule only looks at the first colon of a line,
so `url = http://x` would turn into `url = http =//x`. Older files
rely on that, keep it.
"""

from re import compile as regex

__all__ = ['sanitize', 'sanitize_line']

_LEADING_BLANKS = regex(r'^\s*')
_HASH_MARK = regex(r'^#')
_COLON_DELIMITER = regex(r'([^:]):')


def sanitize_line(line: str) -> str:
    line = _LEADING_BLANKS.sub('', line, count=1)
    line, count = _HASH_MARK.subn(';', line, count=1)
    if count == 0:
        line = _COLON_DELIMITER.sub(r'\1 =', line, count=1)
    return line.replace('"', '')


def sanitize(contents: str) -> str:
    """Sanitize the whole text, line by line."""
    return '\n'.join(sanitize_line(i) for i in contents.split('\n'))
