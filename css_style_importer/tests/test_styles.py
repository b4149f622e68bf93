"""Tests for category to text style mapping."""

import logging
import pytest

from ..core.models import LineHeight, LineHeightMode, StyleDescriptor
from ..core.styles import (
    FONT_WEIGHTS,
    apply_declaration,
    format_category_name,
    map_category,
    map_font_weight,
    parse_declarations,
    parse_leading_float,
)
from ..utils.error import InvalidCategoryFormatError

class TestMapCategory:
    """Tests for map_category."""

    def test_heading(self):
        """Test name, size and automatic line height."""
        descriptor = map_category('.heading-1 { font-size: 24px; line-height: normal; }')
        assert descriptor.name == 'Heading / 1'
        assert descriptor.font_size_pt == 24
        assert descriptor.line_height == LineHeight(LineHeightMode.AUTO)
        assert descriptor.line_height.value is None

    def test_extracted_category_form(self):
        """Test a category as produced by the extractor."""
        descriptor = map_category('.body-large {font-family: Roboto;font-size: 18px;}')
        assert descriptor == StyleDescriptor(
            name='Body Large', font_family='Roboto', font_size_pt=18.0
        )

    def test_all_properties(self):
        """Test every supported property at once."""
        descriptor = map_category(
            '.title {font-family: "Open Sans", Arial;font-size: 20.5px;'
            'font-weight: 600;line-height: 28px;letter-spacing: -0.5px;}'
        )
        assert descriptor.font_family == '"Open Sans", Arial'
        assert descriptor.font_size_pt == 20.5
        assert descriptor.font_style == 'Semi Bold'
        assert descriptor.line_height == LineHeight(LineHeightMode.PIXELS, 28.0)
        assert descriptor.letter_spacing_percent == -0.5

    def test_unknown_property_only_sets_name(self, caplog):
        """Test that unknown keys are skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            descriptor = map_category('.caption { text-transform: uppercase; }')
        assert descriptor == StyleDescriptor(name='Caption')
        assert 'Unknown property: text-transform' in caplog.text

    def test_weight_keeps_earlier_family(self):
        """Test that font-weight does not clear font-family."""
        descriptor = map_category('.a {font-family: Roboto;font-weight: 700;}')
        assert (descriptor.font_family, descriptor.font_style) == ('Roboto', 'Bold')

    def test_family_keeps_earlier_weight(self):
        """Test that font-family does not reset font-weight."""
        descriptor = map_category('.a {font-weight: 300;font-family: Roboto;}')
        assert (descriptor.font_family, descriptor.font_style) == ('Roboto', 'Light')

    def test_last_write_wins(self):
        """Test repeated keys."""
        descriptor = map_category('.a {font-size: 10px;font-size: 12px;}')
        assert descriptor.font_size_pt == 12.0

    def test_letter_spacing_normal(self):
        """Test that normal letter spacing is zero percent."""
        assert map_category('.a {letter-spacing: normal;}').letter_spacing_percent == 0.0

    def test_non_numeric_size_left_unset(self, caplog):
        """Test that a size without a number is ignored."""
        with caplog.at_level(logging.WARNING):
            descriptor = map_category('.a {font-size: large;}')
        assert descriptor.font_size_pt is None
        assert 'font-size' in caplog.text

    def test_empty_body(self):
        """Test a block without declarations."""
        assert map_category('.display-large-2 {}') == StyleDescriptor(name='Display Large / 2')

    def test_value_containing_colon(self):
        """Test that only the first colon separates key and value."""
        descriptor = map_category('.a {font-family: Foo:Bar;}')
        assert descriptor.font_family == 'Foo:Bar'

    @pytest.mark.parametrize('raw', [
        'heading {',
        '.a { font-size: 1px; } trailing',
        '.a font-size: 1px;',
        '{ font-size: 1px; }',
        '',
    ])
    def test_invalid_format(self, raw):
        """Test blocks without the selector { body } shape."""
        with pytest.raises(InvalidCategoryFormatError):
            map_category(raw)

class TestCategoryNames:
    """Tests for format_category_name."""

    @pytest.mark.parametrize('selector,expected', [
        ('.heading-1', 'Heading / 1'),
        ('.body-large', 'Body Large'),
        ('.display-10', 'Display / 10'),
        ('.heading-2-bold', 'Heading 2 Bold'),
        ('.size-1-2', 'Size 1 / 2'),
        ('#hero-title', '#Hero Title'),
        ('#hero-3', '#Hero / 3'),
        ('.caption', 'Caption'),
    ])
    def test_names(self, selector, expected):
        """Test the selector to style name transform."""
        assert format_category_name(selector) == expected

class TestFontWeights:
    """Tests for the font weight table."""

    @pytest.mark.parametrize('weight,name', [
        ('100', 'Thin'),
        ('200', 'Extra Light'),
        ('300', 'Light'),
        ('400', 'Regular'),
        ('500', 'Medium'),
        ('600', 'Semi Bold'),
        ('700', 'Bold'),
        ('800', 'Extra Bold'),
        ('900', 'Black'),
    ])
    def test_known_weights(self, weight, name):
        assert map_font_weight(weight) == name

    @pytest.mark.parametrize('weight', ['bold', '450', '', 'normal'])
    def test_unknown_weight_is_regular(self, weight):
        assert map_font_weight(weight) == 'Regular'

    def test_table_size(self):
        assert len(FONT_WEIGHTS) == 9

class TestHelpers:
    """Tests for parsing helpers."""

    @pytest.mark.parametrize('value,expected', [
        ('24px', 24.0),
        ('1.5em', 1.5),
        ('.5', 0.5),
        ('-0.02em', -0.02),
        ('  12', 12.0),
        ('1e2px', 100.0),
        ('normal', None),
        ('', None),
        ('px12', None),
    ])
    def test_parse_leading_float(self, value, expected):
        """Test numeric prefixes the way CSS lengths are read."""
        assert parse_leading_float(value) == expected

    def test_parse_declarations(self):
        """Test splitting a body into pairs."""
        assert parse_declarations(' font-size: 24px; ; line-height : normal ;') == [
            ('font-size', '24px'),
            ('line-height', 'normal'),
        ]

    def test_apply_declaration_is_pure(self):
        """Test that handlers return a new descriptor."""
        original = StyleDescriptor(name='A')
        updated = apply_declaration(original, ('font-size', '10px'))
        assert original.font_size_pt is None
        assert updated.font_size_pt == 10.0
