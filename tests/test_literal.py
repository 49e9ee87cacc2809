# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import unittest

from sgrfmt import InvalidLiteralError, InvalidKeywordError, ParseError
from sgrfmt.literal import UnwrappedLiteral, unwrap_literal, wrap_raw_literal, min_hashes, rewrite_literal


class UnwrapTestCase(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(unwrap_literal('"abc"'), UnwrappedLiteral('abc'))
        self.assertEqual(unwrap_literal('""'), UnwrappedLiteral(''))

    def test_raw(self):
        self.assertEqual(unwrap_literal('r"abc"'), UnwrappedLiteral('abc', 0))
        self.assertEqual(unwrap_literal('r##"a"#b"##'), UnwrappedLiteral('a"#b', 2))

    def test_is_raw(self):
        self.assertFalse(unwrap_literal('"abc"').is_raw)
        self.assertTrue(unwrap_literal('r"abc"').is_raw)

    def test_invalid(self):
        for s in ['', 'abc', '"', '"abc', 'r', 'rabc', 'r"abc', 'r#"abc"', 'r"abc"#']:
            self.assertRaises(InvalidLiteralError, unwrap_literal, s)

    def test_error_is_parse_error(self):
        self.assertRaises(ParseError, unwrap_literal, 'abc')


class WrapTestCase(unittest.TestCase):
    def test_wrap_raw(self):
        self.assertEqual(wrap_raw_literal('text', 0), 'r"text"')
        self.assertEqual(wrap_raw_literal('text', 2), 'r##"text"##')

    def test_wrap_unwrapped(self):
        self.assertEqual(UnwrappedLiteral('x').wrap(), '"x"')
        self.assertEqual(UnwrappedLiteral('x', 1).wrap(), 'r#"x"#')
        self.assertEqual(UnwrappedLiteral('x', 2).wrap('y'), 'r##"y"##')

    def test_min_hashes(self):
        self.assertEqual(min_hashes('plain'), 0)
        self.assertEqual(min_hashes('a"b'), 1)
        self.assertEqual(min_hashes('a"#b'), 2)
        self.assertEqual(min_hashes('"##"#'), 3)


class RewriteLiteralTestCase(unittest.TestCase):
    def test_plain_literal_decodes_escapes(self):
        self.assertEqual(rewrite_literal('"{+Bold}\\n"'), 'r"\x1b[1m\n"')

    def test_raw_literal_keeps_escapes(self):
        self.assertEqual(rewrite_literal('r#"{+Bold}\\n"#'), 'r#"\x1b[1m\\n"#')

    def test_raw_literal_keeps_hash_count(self):
        self.assertEqual(rewrite_literal('r###"{-Bold}"###'), 'r###"\x1b[22m"###')

    def test_plain_literal_with_quotes(self):
        self.assertEqual(rewrite_literal('"say \\"{+Bold}hi\\""'), 'r#"say "\x1b[1mhi""#')

    def test_format_params_are_kept(self):
        self.assertEqual(rewrite_literal('"{name#RedFg&#DefaultFg}: {}"'), 'r"\x1b[31m{name}\x1b[39m: {}"')

    def test_invalid_keyword(self):
        self.assertRaises(InvalidKeywordError, rewrite_literal, '"{+Nope}"')

    def test_not_a_literal(self):
        self.assertRaises(InvalidLiteralError, rewrite_literal, '{+Bold}')


if __name__ == '__main__':
    unittest.main()
