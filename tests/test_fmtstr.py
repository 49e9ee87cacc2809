# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import unittest
from contextlib import redirect_stdout

from sgrfmt import InvalidKeywordError
from sgrfmt.fmtstr import sgr, sgr_format, sgr_write, sgr_print


class SgrTestCase(unittest.TestCase):
    def test_rewrite(self):
        self.assertEqual(sgr('{+Bold}{}'), '\x1b[1m{}')

    def test_cached(self):
        self.assertIs(sgr('{+Bold}cached'), sgr('{+Bold}cached'))

    def test_escapes(self):
        self.assertEqual(sgr('\\n{+Bold}'), '\\n\x1b[1m')
        self.assertEqual(sgr('\\n{+Bold}', escapes=True), '\n\x1b[1m')


class SgrFormatTestCase(unittest.TestCase):
    def test_positional_and_named(self):
        self.assertEqual(
            sgr_format('{+Bold}{0}{-Bold} is {value#GreenFg&#DefaultFg}', 'Status', value='OK'),
            '\x1b[1mStatus\x1b[22m is \x1b[32mOK\x1b[39m',
        )

    def test_format_spec(self):
        self.assertEqual(sgr_format('{:>4+Bold}', 7), '\x1b[1m   7')

    def test_value_after_marker(self):
        self.assertEqual(sgr_format('{#RedFg&}', 'err'), '\x1b[31merr\x1b[0m')

    def test_invalid_keyword(self):
        self.assertRaises(InvalidKeywordError, sgr_format, '{+Nope}', 1)


class SgrOutputTestCase(unittest.TestCase):
    def test_write(self):
        stream = io.StringIO()
        sgr_write(stream, '{+Underline}{}{-Underline}', 'u')
        self.assertEqual(stream.getvalue(), '\x1b[4mu\x1b[24m')

    def test_print_to_file(self):
        stream = io.StringIO()
        sgr_print('{x#f(208)}', x=1, file=stream, end='')
        self.assertEqual(stream.getvalue(), '\x1b[38;5;208m1')

    def test_print_to_stdout(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            sgr_print('{+Italic}{}', 'i')
        self.assertEqual(stdout.getvalue(), '\x1b[3mi\n')


if __name__ == '__main__':
    unittest.main()
