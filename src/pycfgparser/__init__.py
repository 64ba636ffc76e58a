# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 18:02:11

import logging

from .errors import (
    ConfigParserError, DuplicateSectionError, InvalidArgumentError,
    NoSectionError, NoOptionError, UnexpectedValueError, ParseError,
    ReadError, WriteError, ConfigFileNotFoundError
)
from .ini import IniDocument, IniSection, merge, parse, sanitize, serialize
from .parsers import BaseConfigParser, ConfigParser, NoSectionsConfigParser
from .settings import Settings

__all__ = [
    'ConfigParser', 'NoSectionsConfigParser', 'BaseConfigParser',
    'Settings', 'IniDocument', 'IniSection',
    'merge', 'parse', 'sanitize', 'serialize',
    'ConfigParserError', 'DuplicateSectionError', 'InvalidArgumentError',
    'NoSectionError', 'NoOptionError', 'UnexpectedValueError', 'ParseError',
    'ReadError', 'WriteError', 'ConfigFileNotFoundError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
