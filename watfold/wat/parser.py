""" Parser for tagged forms.

A tagged form looks like this:

.. code::

    (func $add (param i32) (param i32) (result i32)
      local.get 0
      local.get 1
      i32.add
    )

The first token is the label. Then follow the prefix entries: plain
arguments and parenthesized groups. Groups are captured verbatim and not
parsed any further. Once no parenthesis is left in the remaining text,
the rest of the form is the instruction stream, one entry per line.

"""

import enum
import logging
import re
from ..common import MissingOpenParen, MissingLabel, UnbalancedInput
from ..common import TrailingInput
from ..lang.common import SourceLocation, location_at
from .nodes import Tagged, Leaf, Call
from .scanner import parse_sexp


WHITESPACE = ' \t\r\n'

# Captured groups with this label are inlined function definitions:
FUNC_LABEL = 'func'
_call_pattern = re.compile(r'\(' + FUNC_LABEL + r'\s')


def is_call(text: str) -> bool:
    """ Test if a captured group is an inlined function definition """
    return _call_pattern.match(text) is not None


class State(enum.Enum):
    LABEL = 1
    PREFIX = 2
    INSTRUCTIONS = 3


class TaggedParser:
    """ Parse the text of a single tagged form into a Tagged tree.

    The parser runs over the characters of the text and collects tokens
    in a buffer. When a token ends it is classified depending on the
    state the parser is in:

    - LABEL: the token is the label, continue with PREFIX.
    - PREFIX: the first token is always a prefix entry. Later tokens are
      prefix entries while there is still a parenthesis ahead, or when
      they are on the same line as a previous plain prefix token. A token
      following a group is never glued to the header this way. Otherwise
      the form switches to INSTRUCTIONS, and stays there.
    - INSTRUCTIONS: tokens are glued together until the end of the line,
      each line is one instruction.

    A token ended by the closing parenthesis of the form is not on a
    header line: after the first argument it is an instruction. So
    ``(f a b)`` has the instruction ``b``, while ``(f a b\\n)`` has two
    arguments.
    """
    logger = logging.getLogger('wat')

    def __init__(self, filename=None):
        self.filename = filename

    def parse(self, text: str) -> Tagged:
        """ Parse text, which must hold exactly one tagged form """
        assert isinstance(text, str)
        if text[:1] != '(':
            raise MissingOpenParen(
                'Expected opening parenthesis', self._loc_at(text, 0))

        self._text = text
        self._last_open = text.rfind('(')
        self._state = State.LABEL
        self._label = None
        self._prefix = []
        self._instructions = []
        self._buf = []
        self._buf_start = 0
        self._buf_row = 0
        self._prefix_row = 0
        self._prefix_is_group = False
        self._row = 0
        self._row_start = 0

        index = 1
        closed = False
        while index < len(text):
            c = text[index]
            index += 1
            if c == ')':
                self._finish()
                closed = True
                break
            elif c in WHITESPACE:
                self._end_token(c, index)
                if c == '\n':
                    self._row += 1
                    self._row_start = index
            elif c == '(':
                self._end_token(' ', index - 1)
                index = self._capture_group(index - 1)
            else:
                if not self._buf:
                    self._buf_start = index - 1
                    self._buf_row = self._row
                self._buf.append(c)

        if not closed:
            raise UnbalancedInput(
                'Form is never closed', self._loc_at(text, 0))

        if text[index:].strip():
            loc = self._loc_at(text, len(text) - len(text[index:].lstrip()))
            raise TrailingInput('Unexpected text after the form', loc)

        if not self._label:
            raise MissingLabel('Missing label', self._loc_at(text, 0))

        tagged = Tagged(self._label, self._prefix, self._instructions)
        self.logger.debug(
            'Parsed form "%s" with %s prefix entries and %s instructions',
            tagged.label, len(tagged.prefix), len(tagged.instructions))
        return tagged

    def _end_token(self, c, index):
        """ Handle whitespace character c, index points past c """
        if not self._buf:
            return

        if self._state is State.LABEL:
            self._label = self._take()
            self._state = State.PREFIX
            self.logger.debug('Label is "%s"', self._label)
        elif self._state is State.PREFIX:
            if not self._prefix \
                    or self._last_open >= index \
                    or (self._buf_row == self._prefix_row
                        and not self._prefix_is_group):
                self._add_prefix()
            else:
                self.logger.debug(
                    'Instructions of "%s" start at line %s',
                    self._label, self._buf_row + 1)
                self._state = State.INSTRUCTIONS
                self._instruction_char(c)
        else:
            self._instruction_char(c)

    def _instruction_char(self, c):
        if c == '\n':
            self._add_instruction()
        else:
            self._buf.append(c)

    def _finish(self):
        """ Handle the closing parenthesis of the form """
        if not self._buf:
            return

        if self._label is None:
            self._label = self._take()
        elif self._state is State.PREFIX and not self._prefix:
            self._add_prefix()
        else:
            self._add_instruction()

    def _capture_group(self, start):
        """ Capture the group at start as a prefix entry """
        text, index = parse_sexp(self._text, start)
        loc = self._loc(start, len(text))
        if is_call(text):
            node = Call(text, loc)
        else:
            node = Leaf(text, loc)
        self._prefix.append(node)

        newlines = text.count('\n')
        if newlines:
            self._row += newlines
            self._row_start = start + text.rfind('\n') + 1
        self._prefix_row = self._row
        self._prefix_is_group = True
        return index

    def _add_prefix(self):
        node = self._take_leaf()
        if node:
            self._prefix.append(node)
            self._prefix_row = self._buf_row
            self._prefix_is_group = False

    def _add_instruction(self):
        node = self._take_leaf()
        if node:
            self._instructions.append(node)

    def _take(self):
        """ Empty the buffer and return its stripped contents """
        text = ''.join(self._buf).strip()
        self._buf.clear()
        return text

    def _take_leaf(self):
        start = self._buf_start
        text = self._take()
        if text:
            return Leaf(text, self._loc(start, len(text)))

    def _loc(self, index, length):
        col = index - self._row_start + 1
        return SourceLocation(
            self.filename, self._row + 1, col, length, source=self._text)

    def _loc_at(self, text, index):
        return location_at(text, index, filename=self.filename)


def parse_tagged(text: str, filename=None) -> Tagged:
    """ Parse the text of a single tagged form """
    return TaggedParser(filename=filename).parse(text)
