"""
bmlayout.layout - lay out text using font metrics

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple

from .basetypes import Coord, require


class UnresolvedCharacterError(KeyError):
    """Character not in font and no default character to replace it."""

    def __init__(self, char):
        super().__init__(char)
        self.char = char

    def __str__(self):
        return (
            f'Character {self.char!r} (U+{ord(self.char):04X}) '
            'cannot be resolved by this font.'
        )


GlyphRecord = namedtuple('GlyphRecord', 'char position glyph previous')
GlyphRecord.__doc__ = """
Positioned glyph.

char: character actually drawn
position: untransformed draw position relative to the text origin
glyph: glyph metrics
previous: previously drawn character, or None
"""


class LayoutEngine:
    """Text layout on a FontMetrics object. Holds no state between calls."""

    def __init__(self, font):
        require('LayoutEngine', font=font)
        self._font = font

    @property
    def font(self):
        return self._font

    def measure(self, text):
        """Width and height, in pixels, of text when rendered."""
        require('measure', text=text)
        if not text:
            return Coord(0, 0)
        return self.layout(text)

    def layout(self, text, on_glyph=None, on_new_line=None):
        """
        Lay out text and return its measured size.

        on_glyph: called as on_glyph(char, position, glyph, previous) for every drawn glyph
        on_new_line: called without arguments at every line break

        If a character cannot be resolved, UnresolvedCharacterError is raised
        and no size is returned; on_glyph has then already been called for
        the glyphs preceding that character.
        """
        require('layout', text=text)
        records = self._start(text, on_new_line)
        while True:
            try:
                record = next(records)
            except StopIteration as e:
                return e.value
            if on_glyph is not None:
                on_glyph(*record)

    def iter_glyphs(self, text):
        """
        Iterate over positioned glyphs in text order.

        The iterator is single-pass; call again to restart the layout.
        Font settings are taken at the time of the call.
        """
        require('iter_glyphs', text=text)
        return self._start(text)

    def _start(self, text, on_new_line=None):
        """Start the layout automaton with the current font settings."""
        font = self._font
        # truncate toward zero
        return self._process(
            text, int(font.spacing), font.line_spacing, font.default_character,
            on_new_line
        )

    def _process(self, text, spacing, line_spacing, default, on_new_line):
        """Layout automaton; yields GlyphRecords and returns the measured size."""
        font = self._font
        x, y = 0, 0
        max_line_width = 0
        max_char_height = line_spacing
        previous = None
        for char in text:
            if char == '\r':
                continue
            if char == '\n':
                # remove spacing added after last glyph on the line
                x -= spacing
                max_line_width = max(max_line_width, x)
                x = 0
                y += max_char_height
                max_char_height = line_spacing
                if on_new_line is not None:
                    on_new_line()
                continue
            actual = char
            glyph = font.get_glyph(char)
            if glyph is None:
                if default is None:
                    raise UnresolvedCharacterError(char)
                glyph = font.get_glyph(default)
                actual = default
            # kerning is keyed on the requested character, not the replacement
            kerning = 0
            if previous is not None:
                kerning = font.get_kerning(previous, char)
            position = Coord(x + glyph.xoffset + kerning, y + glyph.yoffset)
            yield GlyphRecord(actual, position, glyph, previous)
            # not reset at line breaks
            previous = actual
            x += glyph.xadvance + kerning + spacing
            max_char_height = max(max_char_height, glyph.height)
        y += max_char_height
        return Coord(max(max_line_width, x), y)
