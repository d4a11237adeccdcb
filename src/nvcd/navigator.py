import os

import pynvim

from .util import logger, same_location


class NavigationFailed(Exception):
    pass


class Navigator:
    """Owner of the current location.

    Subclasses implement `current_location()` and `_change()`. A navigator
    either moves to the target or stays where it is.
    """

    def current_location(self):
        raise NotImplementedError()

    def attempt_change(self, target, is_literal=False):
        """Try to change the current location to `target`.

        Return whether the location changed. Raise `NavigationFailed` if the
        target can't be entered.
        """
        before = self.current_location()
        logger.debug(('navigator:change', target, is_literal))
        self._change(target, is_literal)
        return not self.same_location(before, self.current_location())

    @staticmethod
    def same_location(a, b):
        return same_location(a, b)

    def _change(self, target, is_literal):
        raise NotImplementedError()


class OsNavigator(Navigator):
    """Navigate the working directory of this process."""

    def current_location(self):
        return os.getcwd()

    def _change(self, target, is_literal):
        if not is_literal:
            target = os.path.expandvars(os.path.expanduser(target))
        try:
            os.chdir(target)
        except OSError as e:
            raise NavigationFailed(str(e)) from e


class VimNavigator(Navigator):
    """Navigate Neovim's global working directory with `:cd`."""

    def __init__(self, vim):
        self._vim = vim

    def current_location(self):
        return self._vim.funcs.getcwd()

    def _change(self, target, is_literal):
        if not is_literal:
            target = os.path.expandvars(os.path.expanduser(target))
        try:
            self._vim.command('cd ' + self._vim.funcs.fnameescape(target))
        except pynvim.api.NvimError as e:
            raise NavigationFailed(str(e)) from e
