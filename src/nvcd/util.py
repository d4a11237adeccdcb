import logging
import os
from pathlib import Path
import re
from stat import S_ISDIR

import appdirs

_dots_re = re.compile(r'\.\.\.')


def stat_path(path, lstat=True):
    error, stat_res = None, None
    f = path.lstat if lstat else path.stat
    try:
        stat_res = f()
    except OSError as e:
        error = e
    return (stat_res, error)

def expand_dots(path):
    """Expand path segments made of three or more dots.

    Each extra dot climbs one more level, e.g. `...` becomes `../..` and
    `..../foo` becomes `../../../foo`.
    """
    parts = re.split(r'[\\/]', path) if os.altsep else path.split(os.sep)
    expanded = []
    for part in parts:
        if len(part) > 2 and not part.strip('.'):
            while _dots_re.search(part):
                part = _dots_re.sub('..' + os.sep + '..', part)
        expanded.append(part)
    return os.sep.join(expanded)

def resolve_target(path, literal=False):
    """Return the directory to change to when the user asks for `path`.

    Dots are only expanded if `path` isn't `literal`.
    """
    if not literal:
        path = expand_dots(path)
    if os.path.isabs(path):
        stat_res, stat_error = stat_path(Path(path), lstat=False)
        if (stat_error is not None) or not S_ISDIR(stat_res.st_mode):
            # A file or a missing leaf, go to where it would live
            path = os.path.dirname(path.rstrip(os.sep)) or path
    return path

def same_location(a, b):
    return os.path.normcase(os.path.normpath(a)) == \
        os.path.normcase(os.path.normpath(b))

def abbreviate_home(path):
    home = os.path.expanduser('~')
    if path == home:
        return '~'
    if path.startswith(home.rstrip(os.sep) + os.sep):
        return '~' + path[len(home.rstrip(os.sep)):]
    return path

def make_logger():
    logger = logging.getLogger('nvcd')
    logger.setLevel(logging.ERROR)
    log_file = os.environ.get('NVCD_LOG_FILE')
    log_level = os.environ.get('NVCD_LOG_LEVEL')
    if not log_file and log_level:
        log_dir = Path(appdirs.user_log_dir('nvcd'))
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = str(log_dir / 'nvcd.log')
    if log_file:
        handler = logging.FileHandler(log_file)
        logger.setLevel(log_level or logging.ERROR)
        logger.addHandler(handler)
    logger.debug('nvcd logger started.')
    return logger


logger = make_logger()
