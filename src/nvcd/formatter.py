from collections import namedtuple

Row = namedtuple('Row', 'marker id path')

DEFAULT_TEMPLATE = '{marker:1} {id:>3} {path}'


def history_rows(backward, forward, current, marker='*'):
    """Return the history as a list of `Row`s.

    Rows are ordered from the oldest backward entry over the current location
    to the furthest forward entry. Only the current row carries `marker`.
    """
    rows = [Row('', i, path) for i, path in enumerate(backward)]
    cur = len(backward)
    rows.append(Row(marker, cur, current))
    rows.extend(Row('', cur + 1 + i, path) for i, path in enumerate(forward))
    return rows


def format_row(row, template=DEFAULT_TEMPLATE, format_path=str):
    """Render `row` into a line and a list of highlights.

    A highlight is a tuple `(hl_group, start, end)` over the line.
    """
    hls = []
    path = format_path(row.path)
    line = template.format(marker=row.marker, id=row.id, path='')
    start = len(line)
    line += path
    if row.marker:
        hls.append(('NvcdCurrent', 0, len(line)))
    else:
        hls.append(('NvcdId', 0, start))
        hls.append(('NvcdPath', start, len(line)))
    return line, hls


def format_history(rows, template=DEFAULT_TEMPLATE, format_path=str):
    return [format_row(row, template, format_path) for row in rows]
