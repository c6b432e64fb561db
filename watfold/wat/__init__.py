"""
Tools for reading WebAssembly text forms into trees, and for rewriting
those trees into a normalized nested structure.
"""

from .nodes import Node, Leaf, Call, Form, Tagged
from .scanner import parse_sexp
from .parser import TaggedParser, parse_tagged, is_call
from .passes import unfold_funcs, replace_scopey, normalize_scopes
from .writer import format_tagged, tagged_to_text, TaggedWriter


def read_tagged(f) -> Tagged:
    """ Read a tagged form from a file handle """
    text = f.read()
    filename = getattr(f, 'name', None)
    return parse_tagged(text, filename=filename)


__all__ = [
    'Node', 'Leaf', 'Call', 'Form', 'Tagged',
    'parse_sexp', 'TaggedParser', 'parse_tagged', 'is_call',
    'unfold_funcs', 'replace_scopey', 'normalize_scopes',
    'format_tagged', 'tagged_to_text', 'TaggedWriter', 'read_tagged',
]
