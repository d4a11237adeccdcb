from .history import MAX_HISTORY_SIZE
from .util import abbreviate_home


class Options:

    def __init__(self):
        self._options = {o.key: o() for o in Option.__subclasses__()}

    def __getitem__(self, key):
        return self._options[key]

    def __setitem__(self, key, val):
        try:
            option = self._options[key]
        except KeyError:
            raise ValueError('Unknown option "%s"' % key) from None
        option.value = val

    def __iter__(self):
        return iter(self._options)


class Option:
    """An option.

    Subclasses set `key` and `default` and may override `convert()` to
    validate a value before it is stored.
    """
    _val = None

    def __init__(self):
        self.value = self.default

    @property
    def value(self):
        return self._val

    @value.setter
    def value(self, val):
        self._val = self.convert(val)

    @staticmethod
    def convert(val):
        return val

    @property
    def default(self):
        raise NotImplementedError()


class MaxSizeOption(Option):

    key = 'max_size'
    default = MAX_HISTORY_SIZE

    @staticmethod
    def convert(val):
        try:
            val = int(val)
        except (TypeError, ValueError):
            raise ValueError('Invalid value for option "max_size"') from None
        if val < 1:
            raise ValueError('Option "max_size" must be at least 1')
        return val


class MarkerOption(Option):

    key = 'marker'
    default = '*'

    @staticmethod
    def convert(val):
        if not isinstance(val, str) or len(val) != 1:
            raise ValueError('Option "marker" must be a single character')
        return val


class PathStyleOption(Option):

    key = 'path_style'
    default = 'full'
    styles = {
        'full': str,
        'home': abbreviate_home,
    }
    name = None

    def convert(self, val):
        if not isinstance(val, str) or val not in self.styles:
            raise ValueError('Invalid value for option "path_style"')
        self.name = val
        return self.styles[val]
