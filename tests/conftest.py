import shutil
from pathlib import Path

import pytest

from pycfgparser import ConfigParser, NoSectionsConfigParser

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixtures_dir(tmp_path):
    """Copies of the fixture files, safe to `save()` over."""
    for i in FIXTURES.iterdir():
        shutil.copy(i, tmp_path / i.name)
    return tmp_path


@pytest.fixture
def source_cfg(fixtures_dir):
    return fixtures_dir / 'source.cfg'


@pytest.fixture
def cfg():
    return ConfigParser(settings={'linebreak': '\n'})


@pytest.fixture
def cfg_no_sct():
    return NoSectionsConfigParser(settings={'linebreak': '\n'})
