import logging

import pytest

from pycfgparser import (
    ConfigParser, NoOptionError, NoSectionsConfigParser, ReadError, Settings
)
from pycfgparser.errors import ErrorReporter
from pycfgparser.files import IniFile

QUIET = {'throw_exceptions': False, 'linebreak': '\n'}


@pytest.fixture
def quiet():
    return ConfigParser(settings=QUIET)


def test_get_logs_instead_of_raising(quiet, caplog):
    with caplog.at_level(logging.ERROR):
        assert quiet.get('s', 'nope') is None
    assert 'nope' in caplog.text


def test_typed_getters_sentinels(quiet):
    quiet.read_string('[b]\nflag = maybe\n')
    assert quiet.get_boolean('b', 'flag') is None
    assert quiet.get_boolean('b', 'missing') is None
    # missing numbers coerce like empty values
    assert quiet.get_int('b', 'missing') == 0
    assert quiet.get_float('b', 'missing') == 0.0


def test_section_errors(quiet, caplog):
    with caplog.at_level(logging.ERROR):
        assert quiet.add_section('default') is None
        quiet.add_section('s')
        assert quiet.add_section('s') is None
        assert quiet.set('nowhere', 'k', 'v') is quiet
        assert quiet.options('nowhere') == []
        assert quiet.remove_option('nowhere', 'k') is False
    assert quiet.sections() == ['s']
    assert len(caplog.records) == 5


def test_file_errors(quiet, tmp_path):
    assert quiet.save() is False
    assert quiet.write(tmp_path / 'no' / 'dir.ini') is False
    assert quiet.read_file(tmp_path / 'missing.ini') is False
    assert quiet.loaded_files() == []


def test_parse_errors_keep_the_document(quiet, tmp_path):
    quiet.read_string('[a]\nk = v\n')
    quiet.read_string('[broken\n')
    assert quiet.dump() == {'a': {'k': 'v'}}

    broken = tmp_path / 'broken.ini'
    broken.write_text('k = v\n')
    assert quiet.read(broken) == []
    assert quiet.dump() == {'a': {'k': 'v'}}


def test_no_sections_parser_follows_the_flag(tmp_path):
    cfg = NoSectionsConfigParser(settings=QUIET)
    assert cfg.get('nope') is None
    assert cfg.save() is False


def test_flag_can_change_later(quiet):
    quiet.settings.set('throw_exceptions', True)
    with pytest.raises(NoOptionError):
        quiet.get('s', 'nope')


def test_reporter():
    settings = Settings({'throw_exceptions': False})
    reporter = ErrorReporter(settings)
    assert not reporter.throws
    assert reporter.report(NoOptionError(None, 'x'), 'sentinel') == 'sentinel'

    settings.set('throw_exceptions', None)
    assert reporter.throws
    with pytest.raises(NoOptionError, match='<None>'):
        reporter.report(NoOptionError(None, 'x'))


def test_missing_boolean_is_logged_once(quiet, caplog):
    quiet.read_string('[b]\nflag = on\n')
    with caplog.at_level(logging.ERROR):
        assert quiet.get_boolean('b', 'missing') is None
    assert len(caplog.records) == 1
    assert 'missing' in caplog.text


def test_read_failures_follow_the_flag(tmp_path, caplog):
    path = tmp_path / 'app.ini'
    path.write_text('[s]\na = 1\n')
    settings = {'encoding': 'no-such-codec', 'linebreak': '\n'}

    cfg = ConfigParser(settings={**settings, 'throw_exceptions': False})
    with caplog.at_level(logging.ERROR):
        assert cfg.read_file(path) is False
    assert 'Unable to read' in caplog.text
    assert cfg.loaded_files() == []

    cfg = ConfigParser(settings=settings)
    with pytest.raises(ReadError) as exc:
        cfg.read_file(path)
    assert isinstance(exc.value.__cause__, LookupError)


def test_reload_failures_follow_the_flag(quiet, tmp_path, monkeypatch):
    path = tmp_path / 'app.ini'
    path.write_text('[s]\na = 1\n')
    assert quiet.read_file(path)

    def broken_read(self):
        raise PermissionError(13, 'Permission denied', self.pathname)

    monkeypatch.setattr(IniFile, 'read', broken_read)
    quiet.reload()
    assert quiet.get('s', 'a') == '1'

    quiet.settings.set('throw_exceptions', True)
    with pytest.raises(ReadError):
        quiet.reload()
    # still an OSError, for callers that don't know ours.
    with pytest.raises(OSError):
        quiet.reload()


def test_read_skips_files_failing_to_open(tmp_path, monkeypatch):
    path = tmp_path / 'app.ini'
    path.write_text('[s]\na = 1\n')

    def broken_read(self):
        raise PermissionError(13, 'Permission denied', self.pathname)

    monkeypatch.setattr(IniFile, 'read', broken_read)
    cfg = ConfigParser()
    assert cfg.read(path) == []
    assert cfg.sections() == []


def test_failed_read_keeps_the_comments(quiet, tmp_path):
    good = tmp_path / 'good.ini'
    good.write_text('; kept\n[s]\na = 1\n')
    broken = tmp_path / 'broken.ini'
    broken.write_text('; dropped\n[broken\n')

    assert quiet.read_file(good)
    assert quiet.read_file(broken) is False
    assert quiet.comments() == ['; kept']
    assert quiet.dump() == {'s': {'a': '1'}}
