"""
bmlayout - text layout with AngelCode BMFont bitmap fonts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .basetypes import Coord, Rect, InvalidArgument
from .description import (
    FontData, FontInfo, FontCommon, FontPage, Glyph, KerningPair,
    DescriptionError,
)
from .metrics import FontMetrics, ConfigurationError
from .layout import LayoutEngine, GlyphRecord, UnresolvedCharacterError
from .draw import DrawInstruction, iter_draw_instructions, draw_string, render_text
