""" Tree nodes produced by the tagged form parser.

A parsed form is a :class:`Tagged` value holding a label and two ordered
sequences of nodes. A node is either a :class:`Leaf` with unparsed text
or a :class:`Form` wrapping a nested, fully parsed :class:`Tagged`.
"""


class Node:
    """ Base class of entries in the prefix and instruction lists """
    __slots__ = ()


class Leaf(Node):
    """ An opaque, unparsed piece of text.

    This is either a plain argument, a parenthesized group captured
    verbatim or an instruction line.
    """
    __slots__ = ('text', 'loc')

    def __init__(self, text: str, loc=None):
        assert isinstance(text, str)
        self.text = text
        self.loc = loc

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.text)

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __hash__(self):
        return hash((type(self), self.text))


class Call(Leaf):
    """ A captured group that is an inlined function definition.

    Still unparsed, the unfolding pass turns it into a :class:`Form`.
    """
    __slots__ = ()


class Form(Node):
    """ A nested tagged form """
    __slots__ = ('tagged',)

    def __init__(self, tagged):
        assert isinstance(tagged, Tagged)
        self.tagged = tagged

    @property
    def label(self):
        return self.tagged.label

    @property
    def prefix(self):
        return self.tagged.prefix

    @property
    def instructions(self):
        return self.tagged.instructions

    def __repr__(self):
        return 'Form({!r})'.format(self.tagged)

    def __eq__(self, other):
        return isinstance(other, Form) and self.tagged == other.tagged

    def __hash__(self):
        return hash(self.tagged)


class Tagged:
    """ A parsed parenthesized form.

    The label is the first token after the opening parenthesis. The prefix
    holds the arguments and nested groups in front of the instruction
    stream, the instructions hold one entry per instruction line.
    Both sequences are tuples; passes create new trees instead of
    modifying existing ones.
    """
    __slots__ = ('label', 'prefix', 'instructions')

    def __init__(self, label: str, prefix=(), instructions=()):
        if not label:
            raise ValueError('A tagged form needs a label')
        self.label = label
        self.prefix = tuple(prefix)
        self.instructions = tuple(instructions)
        assert all(isinstance(n, Node) for n in self.prefix)
        assert all(isinstance(n, Node) for n in self.instructions)

    def __repr__(self):
        return 'Tagged({!r}, prefix={!r}, instructions={!r})'.format(
            self.label, self.prefix, self.instructions)

    def __eq__(self, other):
        return isinstance(other, Tagged) and \
            (self.label, self.prefix, self.instructions) == \
            (other.label, other.prefix, other.instructions)

    def __hash__(self):
        return hash((self.label, self.prefix, self.instructions))

    def replace(self, prefix=None, instructions=None):
        """ Create a copy of this form with some parts replaced """
        if prefix is None:
            prefix = self.prefix
        if instructions is None:
            instructions = self.instructions
        return Tagged(self.label, prefix, instructions)

    def as_tuple(self):
        """ Convert into nested tuples of plain strings """
        return (
            self.label,
            tuple(node_as_value(n) for n in self.prefix),
            tuple(node_as_value(n) for n in self.instructions),
        )


def node_as_value(node):
    if isinstance(node, Form):
        return node.tagged.as_tuple()
    else:
        return node.text
