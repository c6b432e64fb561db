""" Output of tagged form trees.

Two formats are supported: an indented debug view of the tree and
plain text which can be parsed again.
"""

import json
from .nodes import Tagged, Form


DEBUG_INDENT = 4
TEXT_INDENT = 2


def format_tagged(tree: Tagged, level=0) -> str:
    """ Render a tree as nested, indented debug text.

    For example:

    .. code::

        Tagged {
            label: "func",
            prefix: [
                "a",
            ],
            instructions: [],
        }

    """
    pad = ' ' * (DEBUG_INDENT * (level + 1))
    lines = ['Tagged {']
    lines.append('{}label: {},'.format(pad, _quote(tree.label)))
    for name in ('prefix', 'instructions'):
        nodes = getattr(tree, name)
        if nodes:
            lines.append('{}{}: ['.format(pad, name))
            item_pad = pad + ' ' * DEBUG_INDENT
            for node in nodes:
                if isinstance(node, Form):
                    value = format_tagged(node.tagged, level + 2)
                else:
                    value = _quote(node.text)
                lines.append('{}{},'.format(item_pad, value))
            lines.append('{}],'.format(pad))
        else:
            lines.append('{}{}: [],'.format(pad, name))
    lines.append(' ' * (DEBUG_INDENT * level) + '}')
    return '\n'.join(lines)


def _quote(text):
    return json.dumps(text, ensure_ascii=False)


def tagged_to_text(tree: Tagged, level=0) -> str:
    """ Turn a tree back into the text of a tagged form.

    The label and prefix go on the first line, then follows one line
    per instruction and finally the closing parenthesis.
    """
    parts = [tree.label]
    for node in tree.prefix:
        parts.append(_node_text(node, level + 1))
    pad = ' ' * (TEXT_INDENT * (level + 1))
    lines = ['(' + ' '.join(parts)]
    for node in tree.instructions:
        lines.append(pad + _node_text(node, level + 1))
    lines.append(' ' * (TEXT_INDENT * level) + ')')
    return '\n'.join(lines)


def _node_text(node, level):
    if isinstance(node, Form):
        return tagged_to_text(node.tagged, level)
    else:
        return node.text


class TaggedWriter:
    """ Write trees to a file, either as debug view or as text """
    formats = ('debug', 'text')

    def __init__(self, file=None, fmt='debug'):
        if fmt not in self.formats:
            raise ValueError('Unknown output format {}'.format(fmt))
        self.file = file
        self.fmt = fmt

    def write(self, tree: Tagged):
        assert isinstance(tree, Tagged)
        if self.fmt == 'debug':
            print(format_tagged(tree), file=self.file)
        else:
            print(tagged_to_text(tree), file=self.file)
