"""Tests for color normalization."""

import pytest

from ..core.colors import hex_to_rgb, hsl_to_rgb, normalize_color
from ..core.models import NormalizedColor
from ..utils.error import InvalidHexFormatError, UnsupportedFormatError

class TestHexColors:
    """Tests for hex literals."""

    @pytest.mark.parametrize('value', ['#ff8000', '#FF8000', '#Ff8000'])
    def test_six_digit_hex(self, value):
        """Test that each channel is byte / 255, in any case."""
        assert normalize_color(value) == NormalizedColor(1.0, 128 / 255, 0.0)

    def test_three_digit_hex_expands(self):
        """Test that #abc equals #aabbcc."""
        assert normalize_color('#abc') == normalize_color('#aabbcc')
        assert normalize_color('#fff') == NormalizedColor(1.0, 1.0, 1.0)

    def test_hex_has_no_opacity(self):
        """Test that hex colors never carry opacity."""
        assert normalize_color('#000000').opacity is None

    def test_hex_to_rgb_rejects_malformed(self):
        """Test the hex decoder on its own."""
        with pytest.raises(InvalidHexFormatError):
            hex_to_rgb('#12345')

class TestRgbColors:
    """Tests for rgb and rgba literals."""

    def test_rgb(self):
        """Test rgb() without opacity."""
        color = normalize_color('rgb(255, 0, 0)')
        assert color == NormalizedColor(1.0, 0.0, 0.0)
        assert color.opacity is None

    def test_rgba(self):
        """Test rgba() with alpha."""
        assert normalize_color('rgba(0,0,0,0.5)') == NormalizedColor(0.0, 0.0, 0.0, opacity=0.5)

    def test_rgba_alpha_without_leading_zero(self):
        """Test alpha written as .25."""
        assert normalize_color('rgba(0, 0, 0, .25)').opacity == 0.25

    def test_rgba_without_alpha_defaults_opacity(self):
        """Test that rgba() without alpha still sets opacity to 1."""
        assert normalize_color('rgba(51, 102, 153)') == NormalizedColor(0.2, 0.4, 0.6, opacity=1.0)

    def test_case_insensitive(self):
        """Test upper-case function names."""
        assert normalize_color('RGB(0, 0, 255)') == NormalizedColor(0.0, 0.0, 1.0)

class TestHslColors:
    """Tests for hsl and hsla literals."""

    def test_gray(self):
        """Test hsl(0, 0%, 50%)."""
        assert normalize_color('hsl(0,0%,50%)') == NormalizedColor(0.5, 0.5, 0.5)

    @pytest.mark.parametrize('hue', [0, 45, 120, 200, 359])
    def test_zero_saturation_is_lightness(self, hue):
        """Test that r = g = b = l whenever saturation is 0."""
        color = normalize_color(f'hsl({hue}, 0%, 30%)')
        assert color.r == color.g == color.b == 0.3

    @pytest.mark.parametrize('value,expected', [
        ('hsl(0, 100%, 50%)', (1.0, 0.0, 0.0)),
        ('hsl(120, 100%, 50%)', (0.0, 1.0, 0.0)),
        ('hsl(240, 100%, 50%)', (0.0, 0.0, 1.0)),
        ('hsl(60, 100%, 25%)', (0.5, 0.5, 0.0)),
    ])
    def test_primary_hues(self, value, expected):
        """Test a few well-known conversions."""
        color = normalize_color(value)
        assert (color.r, color.g, color.b) == pytest.approx(expected)
        assert color.opacity is None

    def test_hsla(self):
        """Test hsla() with alpha."""
        color = normalize_color('hsla(240, 100%, 50%, 0.25)')
        assert (color.r, color.g, color.b) == pytest.approx((0.0, 0.0, 1.0))
        assert color.opacity == 0.25

    def test_hsla_without_alpha_defaults_opacity(self):
        """Test that hsla() without alpha sets opacity to 1."""
        assert normalize_color('hsla(0, 0%, 100%)').opacity == 1.0

    def test_hsl_trailing_semicolon(self):
        """Test that hsl() tolerates one trailing semicolon."""
        assert normalize_color('hsl(0, 0%, 20%);') == NormalizedColor(0.2, 0.2, 0.2)

    def test_fractional_percentages_use_integer_part(self):
        """Test that 50.7% reads as 50%."""
        assert normalize_color('hsl(0, 0%, 50.7%)') == NormalizedColor(0.5, 0.5, 0.5)

    def test_hsl_to_rgb_light_red(self):
        """Test the l >= 0.5 branch of the conversion."""
        assert hsl_to_rgb(0.0, 1.0, 0.75) == pytest.approx((1.0, 0.5, 0.5))

class TestUnsupportedColors:
    """Tests for rejected literals."""

    @pytest.mark.parametrize('value', [
        'not-a-color',
        '#ff',
        '#abcd',
        'rgb(1, 2)',
        'rgb(1, 2, 3, 0.5)',
        'hsl(10, 20, 30)',
        'red',
        ' #fff',
        '',
    ])
    def test_unsupported(self, value):
        """Test that unknown grammars raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError):
            normalize_color(value)
