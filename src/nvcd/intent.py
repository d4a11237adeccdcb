"""Navigation intents.

An intent says where the user wants to go. `parse_intent()` turns command
arguments into an intent and is the only place where a bare number is told
apart from a directory name.
"""
from collections import namedtuple
import os
import re


PathIntent = namedtuple('PathIntent', 'path literal')
ById = namedtuple('ById', 'id')


class _Marker:

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


Backward = _Marker('Backward')
Forward = _Marker('Forward')
Empty = _Marker('Empty')

FLAG_COPY = '-c'
FLAG_LITERAL = '-l'


def parse_intent(args, literal=False):
    """Parse command arguments into `(intent, copy)`.

    `-c` asks for the resulting location to be copied, `-l` (or `literal`)
    treats the argument as a path even if it looks like a history id. A lone
    `-` steps backward and `+` steps forward.
    """
    copy = False
    rest = []
    for arg in args:
        if arg == FLAG_COPY:
            copy = True
        elif arg == FLAG_LITERAL:
            literal = True
        else:
            rest.append(arg)
    if len(rest) > 1:
        raise ValueError('Too many arguments: %s' % ' '.join(rest))
    if not rest or not rest[0]:
        return Empty, copy
    arg = rest[0]
    if not literal:
        if arg == '-':
            return Backward, copy
        if arg == '+':
            return Forward, copy
        if is_history_id(arg):
            return ById(int(arg)), copy
    return PathIntent(arg, literal), copy


def is_history_id(arg):
    if os.sep in arg or (os.altsep and os.altsep in arg):
        return False
    return re.fullmatch(r'[0-9]+', arg) is not None
