""" Tests for printing tagged form trees. """

import io
import unittest

from watfold.wat import parse_tagged, unfold_funcs, Tagged, Leaf, Form
from watfold.wat import format_tagged, tagged_to_text, TaggedWriter


SOURCE = """(module $m (func $f (param i32)
  local.get 0
  drop
) (memory 1)
  nop
  i32.const 42
)"""


class DebugFormatTestCase(unittest.TestCase):
    def test_flat(self):
        tree = parse_tagged('(func a b\ni32.add\nend\n)')
        expected = '\n'.join([
            'Tagged {',
            '    label: "func",',
            '    prefix: [',
            '        "a",',
            '        "b",',
            '    ],',
            '    instructions: [',
            '        "i32.add",',
            '        "end",',
            '    ],',
            '}',
        ])
        self.assertEqual(expected, format_tagged(tree))

    def test_nested(self):
        tree = unfold_funcs(parse_tagged('(block (func x\nz\n)\n)'))
        expected = '\n'.join([
            'Tagged {',
            '    label: "block",',
            '    prefix: [',
            '        Tagged {',
            '            label: "func",',
            '            prefix: [',
            '                "x",',
            '            ],',
            '            instructions: [',
            '                "z",',
            '            ],',
            '        },',
            '    ],',
            '    instructions: [],',
            '}',
        ])
        self.assertEqual(expected, format_tagged(tree))

    def test_quoting(self):
        tree = Tagged('data', [Leaf('"a\\n"'), Leaf('(x\ny)')])
        text = format_tagged(tree)
        self.assertIn(r'"\"a\\n\"",', text)
        self.assertIn(r'"(x\ny)",', text)


class TextFormatTestCase(unittest.TestCase):
    def test_text(self):
        tree = parse_tagged('(func a b\ni32.add\nend\n)')
        self.assertEqual(
            '(func a b\n  i32.add\n  end\n)', tagged_to_text(tree))

    def test_reparse_gives_same_tree(self):
        tree = unfold_funcs(parse_tagged(SOURCE))
        text = tagged_to_text(tree)
        self.assertEqual(tree, unfold_funcs(parse_tagged(text)))

    def test_reparse_flat(self):
        tree = parse_tagged('(func a b\ni32.add\nend\n)')
        self.assertEqual(tree, parse_tagged(tagged_to_text(tree)))

    def test_nested_layout(self):
        tree = Tagged('block', [Form(Tagged('func', [Leaf('x')], [Leaf('z')]))],
                      [Leaf('nop')])
        self.assertEqual(
            '(block (func x\n    z\n  )\n  nop\n)', tagged_to_text(tree))


class WriterTestCase(unittest.TestCase):
    def test_debug_writer(self):
        f = io.StringIO()
        TaggedWriter(file=f).write(Tagged('nop'))
        self.assertEqual(
            'Tagged {\n    label: "nop",\n    prefix: [],\n'
            '    instructions: [],\n}\n', f.getvalue())

    def test_text_writer(self):
        f = io.StringIO()
        TaggedWriter(file=f, fmt='text').write(Tagged('nop', [Leaf('1')]))
        self.assertEqual('(nop 1\n)\n', f.getvalue())

    def test_bad_format(self):
        with self.assertRaises(ValueError):
            TaggedWriter(fmt='binary')


if __name__ == '__main__':
    unittest.main()
