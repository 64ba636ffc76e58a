# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 01:18:03

from .model import (
    DEFAULT_SECTION, NO_SECTION, IniDocument, IniSection, merge
)
from .parser import parse, serialize
from .sanitizer import sanitize


# 先 sanitize 再 parse。parse 本身只认 `=` 和 `;`，
# 其他方言（`:`、`#`、引号）都交给 sanitizer 去抹平。
