# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import unittest

from sgrfmt import InvalidKeywordError
from sgrfmt.codes import ADD_STYLE_CODES, REMOVE_STYLE_CODES
from sgrfmt.discrete import Style, Color, ByteColor, RgbColor, color_from_keyword


class StyleTestCase(unittest.TestCase):
    def test_codes(self):
        self.assertEqual(Style.RESET.codes(), (0,))
        self.assertEqual(Style.BOLD.codes(), (1,))
        self.assertEqual(Style.STRIKETHROUGH.codes(), (9,))
        self.assertEqual(Style.NOT_HIDDEN.codes(), (28,))

    def test_not_dim_is_not_bold(self):
        self.assertIs(Style.NOT_DIM, Style.NOT_BOLD)
        self.assertEqual(Style.NOT_DIM.codes(), (22,))

    def test_str(self):
        self.assertEqual(str(Style.BOLD), '\x1b[1m')
        self.assertEqual(str(Style.NOT_UNDERLINE), '\x1b[24m')

    def test_format(self):
        self.assertEqual(f'{Style.ITALIC}text{Style.NOT_ITALIC}', '\x1b[3mtext\x1b[23m')

    def test_from_keyword(self):
        self.assertIs(Style.from_keyword('Bold'), Style.BOLD)
        self.assertIs(Style.from_keyword('Bold', remove=True), Style.NOT_BOLD)
        self.assertIs(Style.from_keyword('Dim', remove=True), Style.NOT_BOLD)
        self.assertIs(Style.from_keyword('Blinking', remove=True), Style.NOT_BLINKING)

    def test_from_keyword_covers_tables(self):
        for keyword, code in ADD_STYLE_CODES.items():
            self.assertEqual(Style.from_keyword(keyword).codes(), (code,))
        for keyword, code in REMOVE_STYLE_CODES.items():
            self.assertEqual(Style.from_keyword(keyword, remove=True).codes(), (code,))

    def test_from_invalid_keyword(self):
        self.assertRaises(InvalidKeywordError, Style.from_keyword, 'NotAStyle')
        self.assertRaises(InvalidKeywordError, Style.from_keyword, 'Reset', remove=True)


class ColorTestCase(unittest.TestCase):
    def test_named(self):
        self.assertEqual(Color.BLACK_FG.codes(), (30,))
        self.assertEqual(Color.DEFAULT_FG.codes(), (39,))
        self.assertEqual(Color.WHITE_BG.codes(), (47,))
        self.assertEqual(str(Color.MAGENTA_BG), '\x1b[45m')

    def test_byte(self):
        self.assertEqual(ByteColor(255).codes(), (38, 5, 255))
        self.assertEqual(str(ByteColor(7, background=True)), '\x1b[48;5;7m')

    def test_rgb(self):
        self.assertEqual(RgbColor(0, 128, 255).codes(), (38, 2, 0, 128, 255))
        self.assertEqual(f'{RgbColor(0, 128, 255, background=True)}', '\x1b[48;2;0;128;255m')

    def test_out_of_range(self):
        self.assertRaises(ValueError, ByteColor, 256)
        self.assertRaises(ValueError, ByteColor, -1)
        self.assertRaises(ValueError, RgbColor, 0, 0, 300)

    def test_equality(self):
        self.assertEqual(ByteColor(10), ByteColor(10))
        self.assertNotEqual(ByteColor(10), ByteColor(10, background=True))


class ColorFromKeywordTestCase(unittest.TestCase):
    def test_named(self):
        self.assertIs(color_from_keyword('RedBg'), Color.RED_BG)
        self.assertIs(color_from_keyword('DefaultFg'), Color.DEFAULT_FG)

    def test_parametric(self):
        self.assertEqual(color_from_keyword('f(208)'), ByteColor(208))
        self.assertEqual(color_from_keyword('b[ff]'), ByteColor(255, background=True))
        self.assertEqual(color_from_keyword('f(1,2,3)'), RgbColor(1, 2, 3))
        self.assertEqual(color_from_keyword('b[008000]'), RgbColor(0, 128, 0, background=True))

    def test_invalid(self):
        with self.assertRaises(InvalidKeywordError) as cm:
            color_from_keyword('PinkFg')
        self.assertEqual(cm.exception.keyword, 'PinkFg')
        self.assertEqual(cm.exception.delimiter, '#')


if __name__ == '__main__':
    unittest.main()
