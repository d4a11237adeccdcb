import os
from pathlib import Path
import re
from textwrap import dedent
from unittest.mock import MagicMock

from pynvim.api import NvimError
import pytest

from nvcd.history import HistoryStore
from nvcd.navigator import Navigator, NavigationFailed, OsNavigator


def make_tree(root, s):
    """Create the directories listed in `s` below `root`.

    Each line is a directory name, nested by four spaces per level.
    """
    parents = [root]
    for line in dedent(s).splitlines():
        if not line.strip():
            continue
        name = line.strip().rstrip('/')
        level = (len(line) - len(line.lstrip(' '))) // 4
        del parents[level + 1:]
        path = parents[level] / name
        path.mkdir()
        parents.append(path)


@pytest.fixture
def tree(tmpdir_factory):
    root = Path(str(tmpdir_factory.mktemp('tree'))).resolve()
    make_tree(root, '''
    aa/
        bb/
            cc/
                dd/
    ee/
    ff/
    gg/
    ''')
    return root


@pytest.fixture
def cwd(tree, monkeypatch):
    """Start each test inside `tree` and restore the cwd afterwards."""
    monkeypatch.chdir(str(tree))
    return tree


class FakeNavigator(Navigator):
    """A navigator over made-up locations.

    Locations in `broken` raise `NavigationFailed`, locations in `stuck` are
    accepted but don't move and locations in `errors` raise the mapped
    exception.
    """

    def __init__(self, location='A'):
        self.location = location
        self.broken = set()
        self.stuck = set()
        self.errors = {}
        self.attempts = []

    def current_location(self):
        return self.location

    def _change(self, target, is_literal):
        self.attempts.append((target, is_literal))
        if target in self.errors:
            raise self.errors[target]
        if target in self.broken:
            raise NavigationFailed('No such directory: ' + target)
        if target in self.stuck:
            return
        self.location = target


@pytest.fixture
def nav():
    return FakeNavigator()


@pytest.fixture
def os_nav(cwd):
    return OsNavigator()


@pytest.fixture
def make_store():
    def make(backward, forward, max_size=100):
        store = HistoryStore(max_size)
        store.restore((backward, forward))
        return store
    return make


@pytest.fixture
def vim(cwd):
    """A stand-in for the `vim` object whose `:cd` changes the real cwd."""
    def command(cmd):
        if not cmd.startswith('cd '):
            return
        arg = cmd[len('cd '):]
        if re.search(r'(?<!\\) ', arg):
            raise NvimError('E172: Only one file name allowed')
        path = re.sub(r'\\(.)', r'\1', arg)
        try:
            os.chdir(path)
        except OSError as e:
            raise NvimError('E344: Can\'t find directory "%s"' % e.filename)

    vim = MagicMock()
    vim.vars = {}
    vim.funcs.getcwd.side_effect = os.getcwd
    vim.funcs.fnameescape.side_effect = lambda s: re.sub(r'([ \\%#])', r'\\\1', s)
    vim.command.side_effect = command
    return vim
