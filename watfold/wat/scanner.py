""" Balanced parenthesis scanner.

Captures one parenthesized group as raw text, without looking at what
is inside of it.
"""

from ..common import UnbalancedInput
from ..lang.common import location_at


def parse_sexp(text: str, start: int):
    """ Capture the balanced group that opens at text[start].

    Returns a tuple with the captured text, including both the opening
    and closing parenthesis, and the index just past the group.
    Indices count characters.
    """
    if text[start:start + 1] != '(':
        raise ValueError(
            'Expected "(" at index {}, not {!r}'.format(
                start, text[start:start + 1]))

    level = 0
    index = start
    while index < len(text):
        c = text[index]
        index += 1
        if c == '(':
            level += 1
        elif c == ')':
            level -= 1
            if level == 0:
                return text[start:index], index

    loc = location_at(text, start)
    raise UnbalancedInput(
        'Parenthesis opened here is never closed ({} open at end)'.format(
            level), loc)
