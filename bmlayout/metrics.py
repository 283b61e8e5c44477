"""
bmlayout.metrics - glyph and kerning lookup for a BMFont

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from types import MappingProxyType

from .basetypes import require
from .layout import LayoutEngine


class ConfigurationError(ValueError):
    """Invalid font configuration."""


class FontMetrics:
    """
    Immutable glyph and kerning tables built from a BMFont description.

    texture: opaque atlas handle, passed on to the rendering backend
    font_data: FontData description
    spacing: extra pixels added after each glyph advance
    default_character: character drawn in place of unresolved characters, or None
    """

    def __init__(self, texture, font_data, spacing=0, default_character=' '):
        require('FontMetrics', texture=texture, font_data=font_data)
        characters = {}
        for glyph in font_data.chars:
            char = _to_char(glyph.id)
            if char in characters:
                raise ConfigurationError(
                    f'Duplicate glyph for character code {glyph.id}.'
                )
            _check_bounds(glyph, font_data.common)
            characters[char] = glyph
        kerning = {}
        for pair in font_data.kernings:
            key = (_to_char(pair.first), _to_char(pair.second))
            if key in kerning:
                logging.debug(
                    'Kerning pair %d, %d redefined; using last value',
                    pair.first, pair.second
                )
            kerning[key] = pair.amount
        if font_data.common.pages > 1:
            logging.debug(
                'Font has %d atlas pages; texture should be a per-page sequence',
                font_data.common.pages
            )
        self._characters = MappingProxyType(characters)
        self._kerning = MappingProxyType(kerning)
        self._data = font_data
        self._texture = texture
        self.default_character = default_character
        self.spacing = spacing
        self.line_spacing = font_data.common.lineHeight
        logging.debug(
            'Font metrics: %d glyphs, %d kerning pairs, line spacing %d',
            len(characters), len(kerning), self.line_spacing
        )

    def __repr__(self):
        return (
            f'{type(self).__name__}(glyphs={len(self._characters)}, '
            f'line_spacing={self.line_spacing}, spacing={self.spacing}, '
            f'default_character={self.default_character!r})'
        )

    def __contains__(self, char):
        return char in self._characters

    @property
    def characters(self):
        """Read-only mapping of characters to glyph metrics."""
        return self._characters

    @property
    def data(self):
        """BMFont description the metrics were built from."""
        return self._data

    @property
    def texture(self):
        """Atlas handle."""
        return self._texture

    @property
    def default_character(self):
        """Character substituted for characters not in the font, or None."""
        return self._default_character

    @default_character.setter
    def default_character(self, value):
        if value is not None and value not in self._characters:
            raise ConfigurationError(
                f'Default character {value!r} does not exist in the font.'
            )
        self._default_character = value

    @property
    def line_spacing(self):
        """Vertical distance in pixels between the base lines of consecutive lines."""
        return self._line_spacing

    @line_spacing.setter
    def line_spacing(self, value):
        self._line_spacing = abs(int(value))

    @property
    def spacing(self):
        """Extra horizontal spacing in pixels between characters."""
        return self._spacing

    @spacing.setter
    def spacing(self, value):
        self._spacing = float(value)

    def get_glyph(self, char):
        """Get glyph metrics for a character, or None if not in the font."""
        return self._characters.get(char)

    def get_kerning(self, first, second):
        """Get kerning amount in pixels between two characters; 0 if no pair defined."""
        return self._kerning.get((first, second), 0)

    def measure(self, text):
        """Width and height in pixels of text when rendered."""
        return LayoutEngine(self).measure(text)

    def layout(self, text, on_glyph=None, on_new_line=None):
        """Lay out text, calling on_glyph for each glyph; return the measured size."""
        return LayoutEngine(self).layout(text, on_glyph, on_new_line)


def _to_char(code):
    """Convert character code to character."""
    try:
        return chr(code)
    except (ValueError, OverflowError) as e:
        raise ConfigurationError(
            f'{code} is not a valid character code.'
        ) from e


def _check_bounds(glyph, common):
    """Warn if glyph rectangle lies outside the atlas."""
    if not common.scaleW or not common.scaleH:
        return
    if (
            glyph.x + glyph.width > common.scaleW
            or glyph.y + glyph.height > common.scaleH
        ):
        logging.warning(
            'Glyph %d at %s extends beyond %dx%d atlas',
            glyph.id, glyph.source, common.scaleW, common.scaleH
        )
