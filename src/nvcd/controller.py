from .formatter import history_rows
from .history import HistoryError
from .intent import Backward, ById, Empty, Forward, PathIntent
from .navigator import NavigationFailed
from .util import logger, resolve_target


class NavigationController:
    """Carry out navigation intents and keep the history in sync.

    The history is only changed after the navigator has actually moved. Any
    rejected move leaves the store exactly as it was before.

    `display` receives the history rows when a listing is requested,
    `clipboard` receives a location to copy and `warn` receives messages about
    moves that couldn't be done.
    """

    def __init__(self, store, navigator, display=None, clipboard=None,
                 warn=None):
        self._store = store
        self._nav = navigator
        self._display = display
        self._clipboard = clipboard
        self._warn = warn
        self.marker = '*'

    def navigate(self, intent, copy=False):
        """Go where `intent` says.

        Return the new location, or None if the location didn't change.
        """
        logger.debug(('navigate', intent, copy))
        if intent is Empty:
            if not copy:
                self.show()
            return self._stay(copy)
        if intent is Backward:
            return self._history_move(self._store.go_backward, copy)
        if intent is Forward:
            return self._history_move(self._store.go_forward, copy)
        if isinstance(intent, ById):
            if intent.id == self._store.current_id:
                return self._stay(copy)
            return self._history_move(
                lambda old: self._store.go_to(intent.id, old), copy)
        if isinstance(intent, PathIntent):
            return self._path_move(intent.path, intent.literal, copy)
        raise TypeError('Unknown navigation intent: %r' % (intent,))

    def back(self, copy=False):
        return self.navigate(Backward, copy)

    def forward(self, copy=False):
        return self.navigate(Forward, copy)

    def go_to(self, id, copy=False):
        return self.navigate(ById(id), copy)

    def go(self, path, literal=False, copy=False):
        return self.navigate(PathIntent(path, literal), copy)

    def rows(self):
        return history_rows(self._store.backward, self._store.forward,
                            self._nav.current_location(), self.marker)

    def show(self):
        rows = self.rows()
        if self._display is not None:
            self._display(rows)
        return rows

    def remove(self, id):
        """Remove entry `id` from history and return its location."""
        try:
            return self._store.remove(id)
        except HistoryError as e:
            self._report(e)
            return None

    def clear(self):
        self._store.clear()
        logger.debug('history cleared')

    def _path_move(self, path, literal, copy):
        old = self._nav.current_location()
        target = resolve_target(path, literal)
        if not self._attempt(target, literal, old):
            return None
        self._store.record(old)
        return self._done(copy)

    def _history_move(self, move, copy):
        old = self._nav.current_location()
        snapshot = self._store.snapshot()
        try:
            target = move(old)
        except HistoryError as e:
            self._report(e)
            return None
        # History entries are real paths, so they're never expanded again
        try:
            moved = self._attempt(target, True, old)
        except BaseException:
            self._store.restore(snapshot)
            raise
        if not moved:
            self._store.restore(snapshot)
            return None
        return self._done(copy)

    def _stay(self, copy):
        if copy:
            self._copy(self._nav.current_location())
        return None

    def _attempt(self, target, literal, old):
        try:
            changed = self._nav.attempt_change(target, literal)
        except NavigationFailed as e:
            self._report(e)
            return False
        if not changed or self._nav.same_location(
                old, self._nav.current_location()):
            logger.info('location unchanged after moving to %r', target)
            return False
        return True

    def _done(self, copy):
        new = self._nav.current_location()
        logger.debug(('navigated', new, self._store))
        if copy:
            self._copy(new)
        return new

    def _copy(self, location):
        if self._clipboard is None:
            logger.warning('no clipboard to copy %r to', location)
            return
        self._clipboard(location)

    def _report(self, error):
        logger.warning('%s: %s', type(error).__name__, error)
        if self._warn is not None:
            self._warn(str(error))
