""" Tests for the balanced parenthesis scanner. """

import unittest

from watfold.wat import parse_sexp
from watfold.common import UnbalancedInput, ParseError


class ScannerTestCase(unittest.TestCase):
    def test_simple_group(self):
        text, index = parse_sexp('(param i32) rest', 0)
        self.assertEqual('(param i32)', text)
        self.assertEqual(11, index)

    def test_nested_groups(self):
        source = '(block (func x (param i32)\nz\n) (result i32)) tail'
        text, index = parse_sexp(source, 7)
        self.assertEqual('(func x (param i32)\nz\n)', text)
        self.assertEqual(')', source[index - 1])
        self.assertEqual(' (result i32)) tail', source[index:])

    def test_consumed_characters(self):
        """ Captured text and index account for every character """
        source = 'xx (a (b (c)) (d)) yy'
        text, index = parse_sexp(source, 3)
        self.assertEqual(index - 3, len(text))
        self.assertEqual(text.count('('), text.count(')'))
        self.assertEqual(source[3:index], text)

    def test_character_positions(self):
        """ Indices count characters, not bytes """
        source = '(λ "ü")→'
        text, index = parse_sexp(source, 0)
        self.assertEqual('(λ "ü")', text)
        self.assertEqual(7, index)
        self.assertEqual('→', source[index])

    def test_unbalanced(self):
        with self.assertRaises(UnbalancedInput) as cm:
            parse_sexp('(block (func x\n', 7)
        self.assertIsInstance(cm.exception, ParseError)
        self.assertEqual(1, cm.exception.loc.row)
        self.assertEqual(8, cm.exception.loc.col)

    def test_not_at_parenthesis(self):
        with self.assertRaises(ValueError):
            parse_sexp('abc (d)', 0)


if __name__ == '__main__':
    unittest.main()
