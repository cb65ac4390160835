"""
Tests for colour parsing and conversion.
Run from project root: python -m pytest tests/test_color.py -v
Or: python -m unittest tests.test_color -v
"""
import unittest

from services.color import Color, ColorParseError, named_color_names, parse_color

EPSILON = 0.01


class TestConstructors(unittest.TestCase):
    def test_from_rgb(self):
        cases = [
            ("black", (0, 0, 0), (0, 0, 0)),
            ("white", (255, 255, 255), (1, 1, 1)),
            ("red", (255, 0, 0), (1, 0, 0)),
            ("green", (0, 255, 0), (0, 1, 0)),
            ("blue", (0, 0, 255), (0, 0, 1)),
            ("mid gray", (128, 128, 128), (0.502, 0.502, 0.502)),
            ("clamped high", (300, 300, 300), (1, 1, 1)),
            ("clamped low", (-10, -10, -10), (0, 0, 0)),
        ]
        for name, channels, expected in cases:
            with self.subTest(name):
                c = Color.from_rgb(*channels)
                self.assertAlmostEqual(c.r, expected[0], delta=EPSILON)
                self.assertAlmostEqual(c.g, expected[1], delta=EPSILON)
                self.assertAlmostEqual(c.b, expected[2], delta=EPSILON)
                self.assertEqual(c.a, 1)

    def test_from_rgb_with_alpha(self):
        self.assertEqual(Color.from_rgb(255, 128, 64, 0.5).a, 0.5)

    def test_from_rgb_float(self):
        c = Color.from_rgb_float(0.5, 0.5, 0.5)
        self.assertEqual((c.r, c.g, c.b), (0.5, 0.5, 0.5))

    def test_from_hex(self):
        cases = [
            ("6 digit", "#ff5500"),
            ("6 digit no hash", "ff5500"),
            ("3 digit", "#f50"),
            ("8 digit with alpha", "#ff550080"),
            ("4 digit with alpha", "#f508"),
        ]
        for name, value in cases:
            with self.subTest(name):
                self.assertEqual(Color.from_hex(value).rgb(), (255, 85, 0))

    def test_from_hex_invalid(self):
        for value in ["#ff", "#gggggg", "#", ""]:
            with self.subTest(value=value):
                with self.assertRaises(ColorParseError):
                    Color.from_hex(value)

    def test_from_hsl(self):
        cases = [
            ("red", (0, 100, 50), (255, 0, 0)),
            ("green", (120, 100, 50), (0, 255, 0)),
            ("blue", (240, 100, 50), (0, 0, 255)),
            ("white", (0, 0, 100), (255, 255, 255)),
            ("black", (0, 0, 0), (0, 0, 0)),
            ("negative hue wraps", (-60, 100, 50), (255, 0, 255)),
        ]
        for name, hsl, expected in cases:
            with self.subTest(name):
                self.assertEqual(Color.from_hsl(*hsl).rgb(), expected)

    def test_from_hsv(self):
        cases = [
            ("red", (0, 100, 100), (255, 0, 0)),
            ("green", (120, 100, 100), (0, 255, 0)),
            ("blue", (240, 100, 100), (0, 0, 255)),
            ("white", (0, 0, 100), (255, 255, 255)),
            ("black", (0, 0, 0), (0, 0, 0)),
        ]
        for name, hsv, expected in cases:
            with self.subTest(name):
                self.assertEqual(Color.from_hsv(*hsv).rgb(), expected)

    def test_from_cmyk(self):
        cases = [
            ("red", (0, 100, 100, 0), (255, 0, 0)),
            ("green", (100, 0, 100, 0), (0, 255, 0)),
            ("blue", (100, 100, 0, 0), (0, 0, 255)),
            ("white", (0, 0, 0, 0), (255, 255, 255)),
            ("black", (0, 0, 0, 100), (0, 0, 0)),
        ]
        for name, cmyk, expected in cases:
            with self.subTest(name):
                self.assertEqual(Color.from_cmyk(*cmyk).rgb(), expected)

    def _assert_close_rgb(self, got, expected, tolerance):
        for g, e in zip(got, expected):
            self.assertLessEqual(abs(g - e), tolerance, f"{got} != {expected}")

    def test_oklch_round_trip(self):
        original = Color.from_rgb(255, 128, 64)
        self._assert_close_rgb(Color.from_oklch(*original.oklch()).rgb(), original.rgb(), 1)

    def test_oklab_round_trip(self):
        original = Color.from_rgb(128, 64, 192)
        self._assert_close_rgb(Color.from_oklab(*original.oklab()).rgb(), original.rgb(), 1)


class TestConversions(unittest.TestCase):
    def test_rgb_and_rgba(self):
        self.assertEqual(Color.from_rgb(255, 128, 64).rgb(), (255, 128, 64))
        self.assertEqual(Color.from_rgb(255, 128, 64, 0.75).rgba(), (255, 128, 64, 0.75))

    def test_hex(self):
        self.assertEqual(Color.from_rgb(0, 0, 0).hex(), "#000000")
        self.assertEqual(Color.from_rgb(255, 255, 255).hex(), "#ffffff")
        self.assertEqual(Color.from_rgb(255, 165, 0).hex(), "#ffa500")

    def test_hex_alpha_rounds_half_up(self):
        self.assertEqual(Color.from_rgb(255, 0, 0, 0.5).hex_alpha(), "#ff000080")

    def test_hsl(self):
        cases = [
            ("red", (255, 0, 0), (0, 100, 50)),
            ("green", (0, 255, 0), (120, 100, 50)),
            ("blue", (0, 0, 255), (240, 100, 50)),
            ("white", (255, 255, 255), (0, 0, 100)),
            ("black", (0, 0, 0), (0, 0, 0)),
            ("gray", (128, 128, 128), (0, 0, 50.2)),
        ]
        for name, rgb, expected in cases:
            with self.subTest(name):
                for got, want in zip(Color.from_rgb(*rgb).hsl(), expected):
                    self.assertAlmostEqual(got, want, delta=EPSILON)

    def test_hsv(self):
        cases = [
            ("red", (255, 0, 0), (0, 100, 100)),
            ("green", (0, 255, 0), (120, 100, 100)),
            ("blue", (0, 0, 255), (240, 100, 100)),
            ("white", (255, 255, 255), (0, 0, 100)),
            ("black", (0, 0, 0), (0, 0, 0)),
        ]
        for name, rgb, expected in cases:
            with self.subTest(name):
                for got, want in zip(Color.from_rgb(*rgb).hsv(), expected):
                    self.assertAlmostEqual(got, want, delta=EPSILON)

    def test_cmyk(self):
        cases = [
            ("red", (255, 0, 0), (0, 100, 100, 0)),
            ("green", (0, 255, 0), (100, 0, 100, 0)),
            ("blue", (0, 0, 255), (100, 100, 0, 0)),
            ("white", (255, 255, 255), (0, 0, 0, 0)),
            ("black", (0, 0, 0), (0, 0, 0, 100)),
        ]
        for name, rgb, expected in cases:
            with self.subTest(name):
                for got, want in zip(Color.from_rgb(*rgb).cmyk(), expected):
                    self.assertAlmostEqual(got, want, delta=EPSILON)

    def test_lab_ranges(self):
        l, a, b = Color.from_rgb(255, 128, 64).lab()
        self.assertTrue(0 <= l <= 100)
        self.assertTrue(-128 <= a <= 128)
        self.assertTrue(-128 <= b <= 128)

    def test_lab_white(self):
        l, a, b = Color.from_rgb(255, 255, 255).lab()
        self.assertAlmostEqual(l, 100, delta=0.1)
        self.assertAlmostEqual(a, 0, delta=0.1)
        self.assertAlmostEqual(b, 0, delta=0.1)

    def test_oklab_ranges(self):
        l, a, b = Color.from_rgb(255, 128, 64).oklab()
        self.assertTrue(0 <= l <= 1)
        self.assertTrue(-0.5 <= a <= 0.5)
        self.assertTrue(-0.5 <= b <= 0.5)

    def test_oklch_ranges(self):
        l, c, h = Color.from_rgb(255, 128, 64).oklch()
        self.assertTrue(0 <= l <= 1)
        self.assertGreaterEqual(c, 0)
        self.assertTrue(0 <= h <= 360)


class TestParse(unittest.TestCase):
    def test_parse(self):
        cases = [
            ("hex with hash", "#ff5500", (255, 85, 0)),
            ("hex without hash", "ff5500", (255, 85, 0)),
            ("hex shorthand", "#f50", (255, 85, 0)),
            ("rgb", "rgb(255, 128, 64)", (255, 128, 64)),
            ("rgba", "rgba(255, 128, 64, 0.5)", (255, 128, 64)),
            ("hsl red", "hsl(0, 100%, 50%)", (255, 0, 0)),
            ("hsv red", "hsv(0, 100%, 100%)", (255, 0, 0)),
            ("hsb red", "hsb(0, 100%, 100%)", (255, 0, 0)),
            ("cmyk red", "cmyk(0, 100, 100, 0)", (255, 0, 0)),
            ("named red", "red", (255, 0, 0)),
            ("named blue", "blue", (0, 0, 255)),
            ("named orange", "orange", (255, 165, 0)),
            ("uppercase name", "  Orange ", (255, 165, 0)),
        ]
        for name, value, expected in cases:
            with self.subTest(name):
                got = parse_color(value).rgb()
                for g, e in zip(got, expected):
                    self.assertLessEqual(abs(g - e), 2, f"{got} != {expected}")

    def test_parse_keeps_alpha(self):
        self.assertEqual(parse_color("rgba(255, 128, 64, 0.5)").a, 0.5)
        self.assertEqual(parse_color("hsla(0, 100%, 50%, 0.25)").a, 0.25)

    def test_parse_oklch(self):
        original = Color.from_rgb(255, 128, 64)
        parsed = parse_color(original.format_oklch())
        for g, e in zip(parsed.rgb(), original.rgb()):
            self.assertLessEqual(abs(g - e), 2)

    def test_parse_invalid(self):
        for value in ["notacolor", "rgb(1, 2)", "hsl(a, b, c)", "cmyk(1.2.3, 0, 0, 0)", ""]:
            with self.subTest(value=value):
                with self.assertRaises(ColorParseError):
                    parse_color(value)


class TestFormatting(unittest.TestCase):
    def setUp(self):
        self.color = Color.from_rgb(255, 128, 64)

    def test_format_rgb(self):
        self.assertEqual(self.color.format_rgb(), "rgb(255, 128, 64)")

    def test_format_rgba(self):
        self.assertEqual(Color.from_rgb(255, 128, 64, 0.5).format_rgba(), "rgba(255, 128, 64, 0.50)")

    def test_format_red(self):
        red = Color.from_rgb(255, 0, 0)
        self.assertEqual(red.format_hsl(), "hsl(0.0, 100.0%, 50.0%)")
        self.assertEqual(red.format_hsv(), "hsv(0.0, 100.0%, 100.0%)")
        self.assertEqual(red.format_cmyk(), "cmyk(0.0%, 100.0%, 100.0%, 0.0%)")

    def test_format_prefixes(self):
        self.assertTrue(self.color.format_lab().startswith("lab("))
        self.assertTrue(self.color.format_oklab().startswith("oklab("))
        self.assertTrue(self.color.format_oklch().startswith("oklch("))

    def test_format_all(self):
        formats = self.color.format_all()
        self.assertEqual(list(formats), ["hex", "rgb", "hsl", "hsv", "cmyk", "lab", "oklab", "oklch"])
        self.assertEqual(formats["hex"], "#ff8040")

    def test_format_target(self):
        self.assertEqual(self.color.format("HEX"), "#ff8040")
        self.assertEqual(self.color.format("hsb"), self.color.format_hsv())
        with self.assertRaises(ColorParseError):
            self.color.format("xyz")


class TestNamedColors(unittest.TestCase):
    def test_named_color_names(self):
        names = named_color_names()
        self.assertEqual(names, sorted(names))
        for expected in ["red", "green", "blue", "white", "black"]:
            self.assertIn(expected, names)


if __name__ == "__main__":
    unittest.main()
