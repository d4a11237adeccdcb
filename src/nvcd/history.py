from .util import logger

MAX_HISTORY_SIZE = 100


class HistoryError(Exception):
    pass


class EmptyHistory(HistoryError):
    pass


class InvalidId(HistoryError):
    pass


class CurrentLocationProtected(HistoryError):
    pass


class HistoryStore:
    """Directory history.

    The store keeps the locations visited before the current one (`backward`,
    oldest first) and the locations that were stepped back over (`forward`,
    nearest first). The current location itself is never stored, it always
    belongs to whoever owns the working directory.

    History ids number the concatenation of backward, current and forward, so
    `len(backward)` is always the id of the current location. Ids are never
    stored and change with every mutation.
    """
    def __init__(self, max_size=MAX_HISTORY_SIZE):
        self._backward = []
        self._forward = []
        self.max_size = max_size

    def __repr__(self):
        s = ', '.join(self._backward + ['*'] + self._forward)
        return f'HistoryStore({s})'

    def __len__(self):
        """Return the number of entries including the current location."""
        return len(self._backward) + len(self._forward) + 1

    @property
    def backward(self):
        """Return a copy of the backward entries."""
        return self._backward[:]

    @property
    def forward(self):
        """Return a copy of the forward entries."""
        return self._forward[:]

    @property
    def current_id(self):
        return len(self._backward)

    @property
    def max_size(self):
        return self._max_size

    @max_size.setter
    def max_size(self, val):
        if val < 1:
            raise ValueError('History size must be at least 1.')
        self._max_size = val
        self._evict()

    def snapshot(self):
        return (tuple(self._backward), tuple(self._forward))

    def restore(self, snapshot):
        backward, forward = snapshot
        self._backward = list(backward)
        self._forward = list(forward)

    def record(self, old):
        """Record that the user left `old` for a location not from history.

        Forward history is folded into the backward stack behind `old`, so
        nothing is lost, only reordered into the past.
        """
        self._backward.append(old)
        self._backward.extend(self._forward)
        self._forward = []
        self._evict()
        logger.debug(('history:record', old, self))

    def go_backward(self, old):
        """Step back from `old` and return the location to move to."""
        if not self._backward:
            raise EmptyHistory('No backward history.')
        target = self._backward.pop()
        self._forward.insert(0, old)
        logger.debug(('history:backward', target, self))
        return target

    def go_forward(self, old):
        """Step forward from `old` and return the location to move to."""
        if not self._forward:
            raise EmptyHistory('No forward history.')
        target = self._forward.pop(0)
        self._backward.append(old)
        logger.debug(('history:forward', target, self))
        return target

    def go_to(self, id, old):
        """Jump from `old` to the entry `id` and return its location.

        Entries between the target and `old` change sides, so their order
        relative to each other is kept. If `id` is the current location,
        `old` is returned and nothing changes.
        """
        self._check_bounds(id)
        cur = len(self._backward)
        if id == cur:
            return old
        if id < cur:
            target = self._backward[id]
            self._forward = self._backward[id + 1:] + [old] + self._forward
            self._backward = self._backward[:id]
        else:
            ndx = id - (cur + 1)
            if ndx >= len(self._forward):
                raise InvalidId(f'{id} is not a location in history.')
            target = self._forward[ndx]
            self._backward = self._backward + [old] + self._forward[:ndx]
            self._forward = self._forward[ndx + 1:]
        logger.debug(('history:go_to', id, target, self))
        return target

    def remove(self, id):
        """Remove the entry `id` and return its location."""
        cur = len(self._backward)
        if id == cur:
            raise CurrentLocationProtected(
                'Cannot remove the current location from history.')
        self._check_bounds(id)
        if id < cur:
            location = self._backward.pop(id)
        else:
            ndx = id - (cur + 1)
            if ndx >= len(self._forward):
                raise InvalidId(f'{id} is not a location in history.')
            location = self._forward.pop(ndx)
        logger.debug(('history:remove', id, location, self))
        return location

    def clear(self):
        self._backward = []
        self._forward = []

    def _check_bounds(self, id):
        if not 0 <= id <= self._max_size - 1:
            raise InvalidId(
                f'History id must be between 0 and {self._max_size - 1}.')

    def _evict(self):
        # Oldest entries go first
        excess = len(self) - self._max_size
        if excess > 0:
            del self._backward[:excess]
        # The backward stack may be too short if most entries are forward
        excess = len(self) - self._max_size
        if excess > 0:
            del self._forward[len(self._forward) - excess:]
