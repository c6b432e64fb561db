""" Unfold the inlined functions of a WebAssembly text form.

Reads a single tagged form, parses the nested function definitions in it
and prints the resulting tree.
"""


import argparse
import logging
import sys
from .base import base_parser, LogSetup
from ..wat import read_tagged, unfold_funcs, replace_scopey, TaggedWriter


logger = logging.getLogger('unfold')

parser = argparse.ArgumentParser(
    description=__doc__,
    parents=[base_parser])
parser.add_argument(
    'wat', metavar='wat file', type=argparse.FileType('r'),
    nargs='?', default='output.wat',
    help='wasm text file to read, default is output.wat')
parser.add_argument(
    '-o', '--output', metavar='output file', type=argparse.FileType('w'),
    help='File to write the tree to, default is stdout')
parser.add_argument(
    '--scopes', action='store_true', default=False,
    help='Rewrite block, loop and end instructions into parentheses')
parser.add_argument(
    '--format', choices=TaggedWriter.formats, default='debug',
    help='Print the tree as debug view or as wasm text')


def unfold(args=None):
    """ Parse, unfold and print a tagged form """
    args = parser.parse_args(args)
    with LogSetup(args):
        with args.wat:
            tree = read_tagged(args.wat)
        tree = unfold_funcs(tree)
        if args.scopes:
            tree = replace_scopey(tree, recursive=True)
        logger.debug('Writing %s output', args.format)
        output = args.output or sys.stdout
        TaggedWriter(file=output, fmt=args.format).write(tree)
        if args.output:
            args.output.close()


if __name__ == '__main__':
    unfold()
