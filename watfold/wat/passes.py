""" Rewrites over parsed tagged forms.

Each pass takes a tree and returns a new tree, the input is left alone.
"""

import logging
from ..common import CompilerError, ReparseFailure
from .nodes import Tagged, Leaf, Call, Form
from .parser import TaggedParser


logger = logging.getLogger('wat.passes')

# Instructions opening a structured region, and the one closing it:
SCOPE_OPENERS = ('block', 'loop')
SCOPE_END = 'end'


def unfold_funcs(tree: Tagged, _trail=()) -> Tagged:
    """ Parse the inlined function definitions in the prefix of tree.

    Each Call entry is parsed into a Form, which is unfolded as well.
    Other entries, and the instructions, are kept as they are.
    """
    assert isinstance(tree, Tagged)
    trail = _trail + (tree.label,)
    prefix = []
    for index, node in enumerate(tree.prefix):
        if isinstance(node, Call):
            node = Form(unfold_funcs(_reparse(node, trail, index), trail))
        prefix.append(node)
    return tree.replace(prefix=prefix)


def _reparse(call, trail, index):
    filename = call.loc.filename if call.loc else None
    try:
        return TaggedParser(filename=filename).parse(call.text)
    except CompilerError as ex:
        logger.debug('Unfolding %s failed: %s', '/'.join(trail), ex.msg)
        raise ReparseFailure(
            'Cannot unfold function in "{}" (prefix entry {}): {}'.format(
                '/'.join(trail), index, ex.msg),
            loc=call.loc, cause=ex, trail=trail, index=index) from ex


def is_scope_opener(text: str) -> bool:
    """ Check if the opcode of an instruction opens a region """
    parts = text.split(None, 1)
    return bool(parts) and parts[0] in SCOPE_OPENERS


def replace_scopey(tree: Tagged, recursive=False) -> Tagged:
    """ Rewrite block/loop/end instructions into parentheses.

    'block' and 'loop' instructions get an opening parenthesis in front,
    an 'end' instruction becomes a closing parenthesis. Balance of the
    introduced parentheses is not checked here.

    By default only the instructions of tree itself are rewritten. With
    recursive set, nested forms in the prefix and instructions are
    rewritten as well.
    """
    assert isinstance(tree, Tagged)
    instructions = [
        _replace_scopey_node(node, recursive) for node in tree.instructions]
    if recursive:
        prefix = [_descend(node) for node in tree.prefix]
    else:
        prefix = tree.prefix
    return tree.replace(prefix=prefix, instructions=instructions)


normalize_scopes = replace_scopey


def _replace_scopey_node(node, recursive):
    if isinstance(node, Form):
        return _descend(node) if recursive else node

    text = node.text
    if is_scope_opener(text):
        return Leaf('(' + text, node.loc)
    elif text == SCOPE_END:
        return Leaf(')', node.loc)
    else:
        return node


def _descend(node):
    if isinstance(node, Form):
        return Form(replace_scopey(node.tagged, recursive=True))
    return node
