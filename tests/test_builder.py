# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import unittest

from sgrfmt import LogicError
from sgrfmt.builder import SgrBuilder, build_sgr
from sgrfmt.discrete import Style, Color, ByteColor, RgbColor
from sgrfmt.writer import StringWriter, StreamWriter


class SgrBuilderTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.builder = SgrBuilder(StringWriter())

    def test_open_write_close(self):
        self.builder.open()
        self.builder.write_code(1)
        self.builder.write_code(4)
        self.builder.close()

        self.assertEqual(self.builder.writer.getvalue(), '\x1b[1;4m')

    def test_escape_context(self):
        with self.builder.escape():
            self.assertTrue(self.builder.is_open)
            self.builder.write_codes([38, 5, 255])

        self.assertFalse(self.builder.is_open)
        self.assertEqual(self.builder.writer.getvalue(), '\x1b[38;5;255m')

    def test_escape_context_closes_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.builder.escape():
                self.builder.write_code(1)
                raise RuntimeError

        self.assertFalse(self.builder.is_open)
        self.assertEqual(self.builder.writer.getvalue(), '\x1b[1m')

    def test_close_without_open(self):
        self.assertRaises(LogicError, self.builder.close)

    def test_open_twice(self):
        self.builder.open()
        self.assertRaises(LogicError, self.builder.open)

    def test_push_typed_values(self):
        with self.builder.escape():
            self.builder.push(Style.BOLD, ByteColor(255), RgbColor(1, 2, 3, background=True))

        self.assertEqual(self.builder.writer.getvalue(), '\x1b[1;38;5;255;48;2;1;2;3m')

    def test_inline_sgr_twice(self):
        self.builder.inline_sgr(Style.ITALIC)
        self.builder.writer.write('text')
        self.builder.inline_sgr(Style.NOT_ITALIC, Color.DEFAULT_FG)

        self.assertEqual(self.builder.writer.getvalue(), '\x1b[3mtext\x1b[23;39m')

    def test_stream_writer(self):
        stream = io.BytesIO()
        builder = SgrBuilder(StreamWriter(stream))
        builder.inline_sgr(Color.GREEN_BG, Style.UNDERLINE)

        self.assertEqual(stream.getvalue(), b'\x1b[42;4m')


class BuildSgrTestCase(unittest.TestCase):
    def test_build(self):
        self.assertEqual(build_sgr(Style.BOLD, Color.RED_FG), '\x1b[1;31m')

    def test_build_single(self):
        self.assertEqual(build_sgr(RgbColor(0, 128, 255)), '\x1b[38;2;0;128;255m')


if __name__ == '__main__':
    unittest.main()
