""" A preprocessor for WebAssembly text (WAT) forms implemented in
pure Python.

Example usage:

>>> from watfold.wat import parse_tagged, unfold_funcs
>>> tree = unfold_funcs(parse_tagged('(block (func x y\\nz\\n)\\ninstr\\n)'))
>>> tree.prefix[0].label
'func'

"""

# Define version here. Used in the setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
