"""
Colour parsing and conversion between notations (hex, rgb, hsl, hsv, cmyk, lab, oklab, oklch).
Colours are stored as sRGB channels normalized to 0-1 plus alpha; every other space is derived.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883

NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#00ff00",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "orange": "#ffa500",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "brown": "#a52a2a",
    "gray": "#808080",
    "grey": "#808080",
    "silver": "#c0c0c0",
    "gold": "#ffd700",
    "navy": "#000080",
    "teal": "#008080",
    "olive": "#808000",
    "maroon": "#800000",
    "lime": "#00ff00",
    "aqua": "#00ffff",
    "fuchsia": "#ff00ff",
}

TARGET_FORMATS = ("hex", "rgb", "hsl", "hsv", "cmyk", "lab", "oklab", "oklch")

_HEX_RE = re.compile(r"^#?[0-9a-fA-F]+$")
_RGB_RE = re.compile(r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+))?\s*\)", re.IGNORECASE)
_HSL_RE = re.compile(
    r"hsla?\s*\(\s*([\d.]+)\s*,\s*([\d.]+)%?\s*,\s*([\d.]+)%?\s*(?:,\s*([\d.]+))?\s*\)", re.IGNORECASE
)
_HSV_RE = re.compile(r"hs[vb]\s*\(\s*([\d.]+)\s*,\s*([\d.]+)%?\s*,\s*([\d.]+)%?\s*\)", re.IGNORECASE)
_CMYK_RE = re.compile(
    r"cmyk\s*\(\s*([\d.]+)%?\s*,\s*([\d.]+)%?\s*,\s*([\d.]+)%?\s*,\s*([\d.]+)%?\s*\)", re.IGNORECASE
)
_OKLCH_RE = re.compile(r"oklch\s*\(\s*([\d.]+)\s+([\d.]+)\s+([\d.]+)\s*\)", re.IGNORECASE)
_OKLAB_RE = re.compile(r"oklab\s*\(\s*([\d.-]+)\s+([\d.-]+)\s+([\d.-]+)\s*\)", re.IGNORECASE)


class ColorParseError(ValueError):
    """Raised when a string cannot be read as a colour."""


def _clamp01(v: float) -> float:
    return min(max(v, 0.0), 1.0)


def _round(v: float) -> int:
    # half away from zero, not Python's round-half-even
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


def _srgb_to_linear(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(v: float) -> float:
    if v <= 0.0031308:
        return v * 12.92
    return 1.055 * v ** (1 / 2.4) - 0.055


def _lab_f(t: float) -> float:
    delta = 6.0 / 29.0
    if t > delta ** 3:
        return t ** (1 / 3)
    return t / (3 * delta * delta) + 4.0 / 29.0


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** (1 / 3), v)


def _hue(r: float, g: float, b: float, hi: float, d: float) -> float:
    if hi == r:
        h = (g - b) / d
        if g < b:
            h += 6
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h * 60


def _sector_rgb(h: float, c: float, x: float) -> tuple[float, float, float]:
    if h < 60:
        return c, x, 0.0
    if h < 120:
        return x, c, 0.0
    if h < 180:
        return 0.0, c, x
    if h < 240:
        return 0.0, x, c
    if h < 300:
        return x, 0.0, c
    return c, 0.0, x


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    # -- constructors --

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: float = 1.0) -> "Color":
        """From 0-255 channels and 0-1 alpha; out-of-range values are clamped."""
        return cls(_clamp01(r / 255), _clamp01(g / 255), _clamp01(b / 255), _clamp01(a))

    @classmethod
    def from_rgb_float(cls, r: float, g: float, b: float) -> "Color":
        return cls(_clamp01(r), _clamp01(g), _clamp01(b), 1.0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Accepts #rgb, #rgba, #rrggbb and #rrggbbaa, with or without the leading #."""
        digits = value.strip()
        if not _HEX_RE.match(digits):
            raise ColorParseError(f"invalid hex color: {value}")
        digits = digits.lstrip("#").lower()
        if len(digits) in (3, 4):
            channels = [int(ch, 16) * 17 for ch in digits]
        elif len(digits) in (6, 8):
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        else:
            raise ColorParseError(f"invalid hex color length: {value}")
        alpha = channels[3] if len(channels) == 4 else 255
        return cls.from_rgb(channels[0], channels[1], channels[2], alpha / 255)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        """h in degrees (wraps), s and l in 0-100."""
        s, l, h = s / 100, l / 100, h % 360
        c = (1 - abs(2 * l - 1)) * s
        x = c * (1 - abs((h / 60) % 2 - 1))
        m = l - c / 2
        r, g, b = _sector_rgb(h, c, x)
        return cls.from_rgb_float(r + m, g + m, b + m)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        s, v, h = s / 100, v / 100, h % 360
        c = v * s
        x = c * (1 - abs((h / 60) % 2 - 1))
        m = v - c
        r, g, b = _sector_rgb(h, c, x)
        return cls.from_rgb_float(r + m, g + m, b + m)

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float) -> "Color":
        c, m, y, k = c / 100, m / 100, y / 100, k / 100
        return cls.from_rgb_float((1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k))

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float) -> "Color":
        l_ = l + 0.3963377774 * a + 0.2158037573 * b
        m_ = l - 0.1055613458 * a - 0.0638541728 * b
        s_ = l - 0.0894841775 * a - 1.2914855480 * b
        lms_l, lms_m, lms_s = l_ ** 3, m_ ** 3, s_ ** 3
        r = 4.0767416621 * lms_l - 3.3077115913 * lms_m + 0.2309699292 * lms_s
        g = -1.2684380046 * lms_l + 2.6097574011 * lms_m - 0.3413193965 * lms_s
        bl = -0.0041960863 * lms_l - 0.7034186147 * lms_m + 1.7076147010 * lms_s
        return cls(
            _clamp01(_linear_to_srgb(r)),
            _clamp01(_linear_to_srgb(g)),
            _clamp01(_linear_to_srgb(bl)),
            1.0,
        )

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> "Color":
        rad = math.radians(h)
        return cls.from_oklab(l, c * math.cos(rad), c * math.sin(rad))

    # -- conversions --

    def rgb(self) -> tuple[int, int, int]:
        return _round(self.r * 255), _round(self.g * 255), _round(self.b * 255)

    def rgba(self) -> tuple[int, int, int, float]:
        return (*self.rgb(), self.a)

    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.rgb())

    def hex_alpha(self) -> str:
        return self.hex() + f"{_round(self.a * 255):02x}"

    def hsl(self) -> tuple[float, float, float]:
        hi, lo = max(self.r, self.g, self.b), min(self.r, self.g, self.b)
        l = (hi + lo) / 2
        if hi == lo:
            return 0.0, 0.0, l * 100
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        return _hue(self.r, self.g, self.b, hi, d), s * 100, l * 100

    def hsv(self) -> tuple[float, float, float]:
        hi, lo = max(self.r, self.g, self.b), min(self.r, self.g, self.b)
        s = 0.0 if hi == 0 else (hi - lo) / hi
        h = 0.0 if hi == lo else _hue(self.r, self.g, self.b, hi, hi - lo)
        return h, s * 100, hi * 100

    def cmyk(self) -> tuple[float, float, float, float]:
        k = 1 - max(self.r, self.g, self.b)
        if k == 1:
            return 0.0, 0.0, 0.0, 100.0
        return (
            (1 - self.r - k) / (1 - k) * 100,
            (1 - self.g - k) / (1 - k) * 100,
            (1 - self.b - k) / (1 - k) * 100,
            k * 100,
        )

    def linear(self) -> "Color":
        return Color(_srgb_to_linear(self.r), _srgb_to_linear(self.g), _srgb_to_linear(self.b), self.a)

    def xyz(self) -> tuple[float, float, float]:
        lin = self.linear()
        r, g, b = lin.r, lin.g, lin.b
        return (
            r * 0.4124564 + g * 0.3575761 + b * 0.1804375,
            r * 0.2126729 + g * 0.7151522 + b * 0.0721750,
            r * 0.0193339 + g * 0.1191920 + b * 0.9503041,
        )

    def lab(self) -> tuple[float, float, float]:
        x, y, z = self.xyz()
        fx, fy, fz = _lab_f(x / _XN), _lab_f(y / _YN), _lab_f(z / _ZN)
        return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)

    def oklab(self) -> tuple[float, float, float]:
        lin = self.linear()
        r, g, b = lin.r, lin.g, lin.b
        l_ = _cbrt(0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b)
        m_ = _cbrt(0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b)
        s_ = _cbrt(0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b)
        return (
            0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
            1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
            0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
        )

    def oklch(self) -> tuple[float, float, float]:
        l, a, b = self.oklab()
        h = math.degrees(math.atan2(b, a))
        if h < 0:
            h += 360
        return l, math.hypot(a, b), h

    # -- CSS-like formatting --

    def format_rgb(self) -> str:
        return "rgb({}, {}, {})".format(*self.rgb())

    def format_rgba(self) -> str:
        r, g, b, a = self.rgba()
        return f"rgba({r}, {g}, {b}, {a:.2f})"

    def format_hsl(self) -> str:
        h, s, l = self.hsl()
        return f"hsl({h:.1f}, {s:.1f}%, {l:.1f}%)"

    def format_hsv(self) -> str:
        h, s, v = self.hsv()
        return f"hsv({h:.1f}, {s:.1f}%, {v:.1f}%)"

    def format_cmyk(self) -> str:
        c, m, y, k = self.cmyk()
        return f"cmyk({c:.1f}%, {m:.1f}%, {y:.1f}%, {k:.1f}%)"

    def format_lab(self) -> str:
        l, a, b = self.lab()
        return f"lab({l:.1f} {a:.1f} {b:.1f})"

    def format_oklab(self) -> str:
        l, a, b = self.oklab()
        return f"oklab({l:.3f} {a:.3f} {b:.3f})"

    def format_oklch(self) -> str:
        l, c, h = self.oklch()
        return f"oklch({l:.3f} {c:.3f} {h:.1f})"

    def format(self, target: str) -> str:
        """Format in one of TARGET_FORMATS ('hsb' is accepted for 'hsv')."""
        target = target.strip().lower()
        if target == "hsb":
            target = "hsv"
        if target == "hex":
            return self.hex()
        if target not in TARGET_FORMATS:
            raise ColorParseError(f"unknown color format '{target}'. Valid formats: {', '.join(TARGET_FORMATS)}")
        return getattr(self, f"format_{target}")()

    def format_all(self) -> dict[str, str]:
        return {target: self.format(target) for target in TARGET_FORMATS}


def is_hex_color(value: str) -> bool:
    digits = value.strip().lstrip("#")
    return len(digits) in (3, 4, 6, 8) and bool(_HEX_RE.match(digits))


def _floats(match: re.Match, count: int) -> list[float]:
    return [float(match.group(i)) for i in range(1, count + 1)]


def _parse(value: str) -> Color:
    text = value.strip()
    lower = text.lower()

    if lower.startswith("#") or is_hex_color(lower):
        return Color.from_hex(text)

    if lower.startswith("rgb"):
        match = _RGB_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid rgb format: {value}")
        alpha = float(match.group(4)) if match.group(4) else 1.0
        return Color.from_rgb(int(match.group(1)), int(match.group(2)), int(match.group(3)), alpha)

    if lower.startswith("hsl"):
        match = _HSL_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid hsl format: {value}")
        color = Color.from_hsl(*_floats(match, 3))
        if match.group(4):
            color = Color(color.r, color.g, color.b, _clamp01(float(match.group(4))))
        return color

    if lower.startswith(("hsv", "hsb")):
        match = _HSV_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid hsv format: {value}")
        return Color.from_hsv(*_floats(match, 3))

    if lower.startswith("cmyk"):
        match = _CMYK_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid cmyk format: {value}")
        return Color.from_cmyk(*_floats(match, 4))

    if lower.startswith("oklch"):
        match = _OKLCH_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid oklch format: {value}")
        return Color.from_oklch(*_floats(match, 3))

    if lower.startswith("oklab"):
        match = _OKLAB_RE.search(text)
        if not match:
            raise ColorParseError(f"invalid oklab format: {value}")
        return Color.from_oklab(*_floats(match, 3))

    if lower in NAMED_COLORS:
        return Color.from_hex(NAMED_COLORS[lower])

    raise ColorParseError(f"unable to parse color: {value}")


def parse_color(value: str) -> Color:
    """
    Read a colour from hex, rgb()/rgba(), hsl()/hsla(), hsv()/hsb(), cmyk(),
    oklch(), oklab() or a basic CSS colour name. Raises ColorParseError.
    """
    try:
        return _parse(value)
    except ColorParseError:
        raise
    except (ValueError, OverflowError) as e:
        # numbers the patterns accept but float() does not, e.g. "1.2.3"
        raise ColorParseError(f"unable to parse color: {value}") from e


def named_color_names() -> list[str]:
    return sorted(NAMED_COLORS)
