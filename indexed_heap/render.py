from typing import Any, List, Sequence

EMPTY_HEAP = 'empty heap'


def render_levels(items: Sequence[Any]) -> str:
    """
    Renders an array-backed binary tree level by level.
    Level `k` holds up to `2 ** k` items separated by a space, one level per line.

    :param items: tree items in storage order
    :return: multiline rendering or `empty heap`
    """

    if not items:
        return EMPTY_HEAP

    lines: List[str] = []
    start, width = 0, 1
    while start < len(items):
        level = items[start:start + width]
        lines.append(' '.join(str(item) for item in level))
        start += width
        width *= 2

    return '\n'.join(lines)
