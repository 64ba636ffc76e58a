# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2024/10/14 19:55:40

"""pycfgparser CLI.

Usage:
    pycfgparser get app.ini port -s server -t int
    pycfgparser set app.ini port 8080 -s server
    pycfgparser dump base.ini local.ini -f yaml
    pycfgparser --no-sections get .env DEBUG -t bool
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

import yaml

from .errors import ConfigParserError
from .parsers import BaseConfigParser, ConfigParser, NoSectionsConfigParser

GETTERS = {
    'str': 'get',
    'int': 'get_int',
    'float': 'get_float',
    'bool': 'get_boolean',
}


def _make_parser(args: argparse.Namespace) -> BaseConfigParser:
    settings = {'delimiter': args.delimiter, 'linebreak': '\n'}
    if args.no_sections:
        return NoSectionsConfigParser(settings=settings)
    return ConfigParser(settings=settings)


def _section_args(args: argparse.Namespace) -> list:
    return [] if args.no_sections else [args.section]


def cmd_get(args: argparse.Namespace) -> int:
    cfg = _make_parser(args)
    cfg.read_file(args.file)
    getter = getattr(cfg, GETTERS[args.type])
    value = getter(*_section_args(args), args.option, args.fallback)
    if isinstance(value, bool):
        value = str(value).lower()
    print(value)
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    cfg = _make_parser(args)
    cfg.read_file(args.file)
    if (isinstance(cfg, ConfigParser) and args.section
            and not cfg.has_section(args.section)):
        cfg.add_section(args.section)
    cfg.set(*_section_args(args), args.option, args.value)
    cfg.save()
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    cfg = _make_parser(args)
    if not cfg.read(args.files):
        logging.warning('None of the given files could be read.')
    if args.format == 'ini':
        cfg.output()
    elif args.format == 'json':
        print(json.dumps(cfg.dump(), ensure_ascii=False, indent=2))
    else:
        # keep the file order of options, pyyaml sorts by default.
        print(yaml.safe_dump(cfg.dump(), allow_unicode=True,
                             sort_keys=False, default_flow_style=False),
              end='')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pycfgparser',
        description='Read, edit and convert INI configuration files.')
    parser.add_argument('--no-sections', action='store_true',
                        help='files are flat "key = value" lists')
    parser.add_argument('--delimiter', default='=',
                        help='delimiter used when writing (default: =)')
    parser.add_argument('-v', '--verbose', action='store_true')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('get', help='print an option value')
    p.add_argument('file')
    p.add_argument('option')
    p.add_argument('-s', '--section', default=None)
    p.add_argument('-t', '--type', choices=list(GETTERS), default='str')
    p.add_argument('--fallback', default=None)
    p.set_defaults(func=cmd_get)

    p = sub.add_parser('set', help='set an option and save the file')
    p.add_argument('file')
    p.add_argument('option')
    p.add_argument('value')
    p.add_argument('-s', '--section', default=None)
    p.set_defaults(func=cmd_set)

    p = sub.add_parser('dump', help='merge files and print the result')
    p.add_argument('files', nargs='+')
    p.add_argument('-f', '--format', choices=['ini', 'json', 'yaml'],
                   default='ini')
    p.set_defaults(func=cmd_dump)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    try:
        return args.func(args)
    except ConfigParserError as e:
        logging.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
