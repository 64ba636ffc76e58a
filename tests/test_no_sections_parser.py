import pytest

from pycfgparser import NoOptionError, NoSectionsConfigParser


def test_supported_ini_file_without_section(cfg_no_sct, fixtures_dir):
    cfg = cfg_no_sct
    cfg.read(fixtures_dir / 'no_section_ini_file.cfg')
    assert cfg.get('key') == 'value'
    assert cfg.get('spaces in keys') == 'allowed'
    assert cfg.get('spaces in values') == 'allowed as well'
    assert cfg.get('spaces around the delimiter') == 'obviously'
    assert cfg.get('you can also use') == 'to delimit keys from values'
    assert cfg.get('values like this') == '1000000'
    assert cfg.get('or this') == '3.14159265359'
    assert cfg.get('are they treated as numbers?') == 'no'
    assert cfg.get('integers, floats and booleans are held as') == 'strings'
    assert cfg.get('can use the API to get converted values directly') == \
        'true'
    assert cfg.get('chorus') == "I'm a lumberjack, and I'm okay"
    assert not cfg.has_option('key_without_value')
    assert 'key_without_value' in cfg.options()
    assert cfg.get('empty string value here') == ''
    assert cfg.get('subtitle') == 'test &amp'

    assert cfg.save()
    again = NoSectionsConfigParser()
    again.read(fixtures_dir / 'no_section_ini_file.cfg')
    assert again.dump() == cfg.dump()


def test_read_merges_per_option(cfg_no_sct, tmp_path):
    a = tmp_path / 'a.cfg'
    b = tmp_path / 'b.cfg'
    a.write_text('host = localhost\nport = 80\nuser = me\n')
    b.write_text('port: 8080\n')
    cfg_no_sct.read([a, b])
    assert cfg_no_sct.dump() == {
        'host': 'localhost', 'port': '8080', 'user': 'me'}


def test_section_headers_are_ignored(cfg_no_sct):
    cfg_no_sct.read_string('[whatever]\na = 1\n[other]\nb = 2\n')
    assert cfg_no_sct.options() == ['a', 'b']


def test_get_fallback_chain():
    cfg = NoSectionsConfigParser(defaults={'timeout': 30})
    cfg.read_string('a = 1\n')
    assert cfg.get('a') == '1'
    assert cfg.get('a', 'fb') == '1'
    assert cfg.get('b', 'fb') == 'fb'
    assert cfg.get('timeout') == '30'
    with pytest.raises(NoOptionError) as exc:
        cfg.get('nope')
    assert exc.value.section is None


def test_typed_getters(cfg_no_sct):
    cfg_no_sct.read_string('port = 8080\nratio = 0.75\ndebug = On\nname = x\n')
    assert cfg_no_sct.get_int('port') == 8080
    assert cfg_no_sct.get_float('ratio') == 0.75
    assert cfg_no_sct.get_boolean('debug') is True
    assert cfg_no_sct.get_int('name') == 0
    assert cfg_no_sct.get_int('missing', 3) == 3


def test_set_and_remove(cfg_no_sct):
    assert cfg_no_sct.set('n', 1) is cfg_no_sct
    cfg_no_sct.set(2, None)
    assert cfg_no_sct.dump() == {'n': '1', '2': 'None'}
    assert cfg_no_sct.remove_option('n') is True
    assert cfg_no_sct.remove_option('n') is False


def test_write(cfg_no_sct, tmp_path):
    cfg_no_sct.read_string('b = 2\nbare\na: "1"\n')
    out = tmp_path / 'flat.cfg'
    assert cfg_no_sct.write(out)
    assert out.read_text() == 'b = "2"\nbare\na = "1"\n'


def test_mapping_protocol(cfg_no_sct):
    cfg_no_sct.read_dict({'a': 1, 'b': 'two'})
    assert cfg_no_sct['a'] == '1'
    cfg_no_sct['c'] = 3
    assert cfg_no_sct.get('c') == '3'
    del cfg_no_sct['a']
    assert list(cfg_no_sct) == ['b', 'c']
    assert len(cfg_no_sct) == 2


def test_clear(cfg_no_sct):
    cfg_no_sct.read_string('a = 1\n')
    cfg_no_sct.clear()
    assert cfg_no_sct.options() == []
    cfg_no_sct.set('b', 2)
    assert cfg_no_sct.dump() == {'b': '2'}
