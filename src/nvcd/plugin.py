import pynvim

from .controller import NavigationController
from .formatter import format_history
from .history import HistoryError, HistoryStore
from .intent import parse_intent
from .navigator import VimNavigator
from .option import Options
from .util import logger

HIGHLIGHTS = {
    'NvcdCurrent': 'Title',
    'NvcdId': 'LineNr',
    'NvcdPath': 'Directory',
}


class Session:

    def __init__(self, vim):
        self._vim = vim
        self.options = Options()
        self.store = HistoryStore()
        self.navigator = VimNavigator(vim)
        self.controller = NavigationController(
            self.store,
            self.navigator,
            display=self.display,
            clipboard=self.copy,
            warn=self.warn,
        )
        self.load_options()

    def load_options(self):
        """Read options from `g:nvcd_<key>` variables."""
        for key in self.options:
            val = self._vim.vars.get('nvcd_' + key)
            if val is None:
                continue
            try:
                self.options[key] = val
            except ValueError as e:
                self.warn(str(e))
        self.apply_options()

    def apply_options(self):
        self.store.max_size = self.options['max_size'].value
        self.controller.marker = self.options['marker'].value

    def display(self, rows):
        lines = format_history(
            rows, format_path=self.options['path_style'].value)
        chunks = []
        for line, hls in lines:
            for hl_group, start, end in hls:
                chunks.append([line[start:end], hl_group])
            chunks.append(['\n'])
        self._vim.api.echo(chunks[:-1], True, {})

    def copy(self, location):
        self._vim.funcs.setreg('+', location)

    def warn(self, msg):
        self._vim.api.echo([['nvcd: ' + msg, 'WarningMsg']], True, {})


@pynvim.plugin
class Plugin:

    def __init__(self, vim):
        logger.debug('nvcd plugin init')
        self._vim = vim
        self._session = None

    @property
    def _s(self):
        if self._session is None:
            self._session = Session(self._vim)
            self.define_highlights()
        return self._session

    def define_highlights(self):
        for group, link in HIGHLIGHTS.items():
            self._vim.command(f'hi default link {group} {link}')

    @pynvim.command('Cd', nargs='*', bang=True, complete='dir', sync=True)
    def cmd_cd(self, args, bang):
        """Change directory, by path or history id.

        With a bang, the argument is always a path.
        """
        try:
            intent, copy = parse_intent(args, literal=bang)
        except ValueError as e:
            self._s.warn(str(e))
            return
        self._s.controller.navigate(intent, copy)

    @pynvim.command('CdBack', nargs=0, sync=True)
    def cmd_cd_back(self):
        self._s.controller.back()

    @pynvim.command('CdForward', nargs=0, sync=True)
    def cmd_cd_forward(self):
        self._s.controller.forward()

    @pynvim.command('CdHistory', nargs=0, sync=True)
    def cmd_cd_history(self):
        self._s.controller.show()

    @pynvim.command('CdRemove', nargs=1, sync=True)
    def cmd_cd_remove(self, args):
        try:
            id = int(args[0])
        except ValueError:
            self._s.warn('Not a history id: %s' % args[0])
            return
        self._s.controller.remove(id)

    @pynvim.command('CdClear', nargs=0, bang=True, sync=True)
    def cmd_cd_clear(self, bang):
        if not bang:
            answer = self._vim.funcs.confirm(
                'Clear directory history?', '&Yes\n&No', 2)
            if answer != 1:
                return
        self._s.controller.clear()

    @pynvim.function('NvcdHistory', sync=True)
    def func_nvcd_history(self, args): # pylint:disable=unused-argument
        """Return the history as a list of `[marker, id, path]`."""
        return [list(row) for row in self._s.controller.rows()]

    @pynvim.function('NvcdSet', sync=True)
    def func_nvcd_set(self, args):
        key, val = args
        try:
            self._s.options[key] = val
        except ValueError as e:
            self._s.warn(str(e))
            return
        self._s.apply_options()
