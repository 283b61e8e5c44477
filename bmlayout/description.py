"""
bmlayout.description - in-memory AngelCode BMFont description

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import namedtuple

from .basetypes import Rect, require


# field layout follows https://www.angelcode.com/products/bmfont/doc/file_format.html
# mapping layout follows https://github.com/Jam3/load-bmfont/blob/master/json-spec.md


class DescriptionError(ValueError):
    """Malformed font description."""


##############################################################################
# records

_GLYPH_FIELDS = (
    'id', 'x', 'y', 'width', 'height',
    'xoffset', 'yoffset', 'xadvance', 'page', 'chnl'
)

class Glyph(namedtuple('Glyph', _GLYPH_FIELDS, defaults=(0,) * 9)):
    """Atlas metrics for one character."""

    @property
    def char(self):
        """Character represented by this glyph."""
        return chr(self.id)

    @property
    def source(self):
        """Rectangle covered by the glyph on its atlas page."""
        return Rect(self.x, self.y, self.width, self.height)


class KerningPair(namedtuple('KerningPair', 'first second amount')):
    """Kerning adjustment between two character codes."""


_COMMON_FIELDS = (
    'lineHeight', 'base', 'scaleW', 'scaleH', 'pages', 'packed',
    'alphaChnl', 'redChnl', 'greenChnl', 'blueChnl',
)

FontCommon = namedtuple('FontCommon', _COMMON_FIELDS, defaults=(0,) * 10)
FontCommon.__doc__ = 'Metrics common to all glyphs.'

FontPage = namedtuple('FontPage', 'id file')
FontPage.__doc__ = 'Atlas page reference.'


# integer fields of the info block; other fields are kept as given
_INFO_INTS = (
    'size', 'bold', 'italic', 'unicode', 'stretchH', 'smooth', 'aa', 'outline'
)

_INFO_DEFAULTS = dict(
    face='', size=0, bold=0, italic=0, charset='', unicode=1,
    stretchH=100, smooth=0, aa=1,
    padding=(0, 0, 0, 0), spacing=(0, 0), outline=0,
)

class FontInfo(namedtuple('FontInfo', tuple(_INFO_DEFAULTS))):
    """Information on how the font was generated."""

    @classmethod
    def create(cls, **kwargs):
        """Create from string or numeric values."""
        info = {**_INFO_DEFAULTS}
        for key, value in kwargs.items():
            if key not in info:
                logging.debug('Ignoring unknown info field `%s`', key)
                continue
            try:
                if key in _INFO_INTS:
                    value = _to_int(value)
                elif key in ('padding', 'spacing'):
                    value = _to_int_tuple(value)
            except (TypeError, ValueError) as e:
                raise DescriptionError(
                    f'Invalid `info` field `{key}`: {value!r}'
                ) from e
            info[key] = value
        return cls(**info)


##############################################################################
# conversions

def _to_int(value):
    """Convert str or numeric value to int."""
    if isinstance(value, str):
        value = value.lower()
    if value == 'true':
        return 1
    elif value == 'false':
        return 0
    else:
        return int(value)

def _to_int_tuple(value):
    """Convert comma-separated string or sequence to tuple of int."""
    if isinstance(value, str):
        value = value.split(',')
    return tuple(_to_int(_v) for _v in value)

def _record(cls, fields, strdict, section):
    """Build record of ints from dict, ignoring unknown keys."""
    try:
        return cls(**{
            _k: _to_int(_v) for _k, _v in strdict.items()
            if _k in fields
        })
    except (TypeError, ValueError) as e:
        raise DescriptionError(
            f'Invalid `{section}` entry {strdict!r}: {e}'
        ) from e


##############################################################################
# aggregate

class FontData:
    """Parsed BMFont description: info, common metrics, pages, glyphs, kerning."""

    def __init__(self, info=None, common=None, pages=(), chars=(), kernings=()):
        require('FontData', common=common)
        self.info = info or FontInfo.create()
        self.common = common
        self.pages = tuple(pages)
        self.chars = tuple(chars)
        self.kernings = tuple(kernings)

    def __repr__(self):
        return (
            f'{type(self).__name__}(face={self.info.face!r}, '
            f'chars={len(self.chars)}, kernings={len(self.kernings)})'
        )

    @classmethod
    def from_dict(cls, tree):
        """
        Build description from an already deserialised mapping.

        The mapping has keys `info`, `common`, `pages`, `chars` and optionally
        `kernings`. `pages` may hold file names or dicts with `id` and `file`.
        """
        require('FontData.from_dict', tree=tree)
        for tag in ('info', 'common', 'pages', 'chars'):
            if tag not in tree:
                raise DescriptionError(
                    f'Not a valid BMFont description: no `{tag}` key found.'
                )
        pages = []
        for count, page in enumerate(tree['pages']):
            if isinstance(page, str):
                pages.append(FontPage(count, page))
            else:
                try:
                    pages.append(FontPage(_to_int(page['id']), page['file']))
                except (KeyError, TypeError, ValueError) as e:
                    raise DescriptionError(
                        f'Invalid `pages` entry {page!r}: {e}'
                    ) from e
        data = cls(
            info=FontInfo.create(**tree['info']),
            common=_record(FontCommon, _COMMON_FIELDS, tree['common'], 'common'),
            pages=pages,
            chars=(
                _record(Glyph, _GLYPH_FIELDS, _elem, 'chars')
                for _elem in tree['chars']
            ),
            kernings=(
                _record(KerningPair, KerningPair._fields, _elem, 'kernings')
                for _elem in tree.get('kernings', ())
            ),
        )
        logging.debug(
            'Description `%s`: %d glyphs, %d kerning pairs, %d pages',
            data.info.face, len(data.chars), len(data.kernings), len(data.pages)
        )
        return data
