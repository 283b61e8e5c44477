"""
bmlayout.draw - draw laid-out text from a glyph atlas

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from math import cos, sin, degrees
from collections import namedtuple

from PIL import Image, ImageChops

from .basetypes import Coord, Rect, require, to_tuple
from .layout import LayoutEngine


# channel bitfield
_CHNL_B = 1 << 0
_CHNL_G = 1 << 1
_CHNL_R = 1 << 2
_CHNL_A = 1 << 3

# image band and common channel descriptor for each channel
_CHNL_BANDS = {
    _CHNL_B: ('B', 'blueChnl'),
    _CHNL_G: ('G', 'greenChnl'),
    _CHNL_R: ('R', 'redChnl'),
    _CHNL_A: ('A', 'alphaChnl'),
}

# channel descriptors: 0 glyph, 1 outline, 2 glyph and outline, 3 zero, 4 one
_GLYPH_CHANNELS = (0, 2)


DrawInstruction = namedtuple('DrawInstruction', 'char page source dest rotation')
DrawInstruction.__doc__ = """
Sprite to be drawn from the glyph atlas.

char: character drawn
page: atlas page index
source: Rect on the atlas page
dest: Rect on the target surface
rotation: rotation in radians about the top-left corner of dest
"""


def _transform(scale, rotation):
    """Scale-then-rotate matrix as (a, b, c, d): x' = a*x + c*y, y' = b*x + d*y."""
    scale_x, scale_y = scale
    cos_r, sin_r = cos(rotation), sin(rotation)
    return (scale_x * cos_r, scale_x * sin_r, -scale_y * sin_r, scale_y * cos_r)


def iter_draw_instructions(font, text, position=(0, 0), *, rotation=0.0, scale=1):
    """
    Lay out text and transform glyph positions for drawing.

    position: location of the text origin on the target surface
    rotation: angle in radians to rotate the text about its origin
    scale: scale factor, as a number or (x, y) pair
    """
    require('iter_draw_instructions', font=font, text=text)
    scale = to_tuple(scale, length=2)
    if any(_s < 0 for _s in scale):
        raise ValueError(f'Scale must not be negative: {scale}')
    position = to_tuple(position, length=2)
    return _iter_draw_instructions(font, text, position, rotation, scale)


def _iter_draw_instructions(font, text, position, rotation, scale):
    """Generate draw instructions for iter_draw_instructions."""
    scale_x, scale_y = scale
    pos_x, pos_y = position
    a, b, c, d = _transform(scale, rotation)
    for record in LayoutEngine(font).iter_glyphs(text):
        glyph = record.glyph
        x, y = record.position
        yield DrawInstruction(
            char=record.char,
            page=glyph.page,
            source=glyph.source,
            dest=Rect(
                int(pos_x + a*x + c*y),
                int(pos_y + b*x + d*y),
                int(glyph.width * scale_x),
                int(glyph.height * scale_y),
            ),
            rotation=rotation,
        )


##############################################################################
# Pillow backend

def get_page(texture, page):
    """Get atlas page image from texture handle: an image or a sequence of images."""
    if isinstance(texture, (list, tuple, dict)):
        return texture[page]
    if page:
        logging.warning('Single atlas image given; ignoring page %d', page)
    return texture


def _glyph_sprite(atlas, glyph, common):
    """Crop RGBA glyph sprite from atlas page."""
    sprite = atlas.crop(glyph.source.box).convert('RGBA')
    if not common.packed or glyph.chnl not in _CHNL_BANDS:
        return sprite
    band, descriptor = _CHNL_BANDS[glyph.chnl]
    if getattr(common, descriptor) not in _GLYPH_CHANNELS:
        logging.debug(
            'Channel %s holds no glyph data; using full sprite for %r',
            band, glyph.char
        )
    else:
        # glyph is stored in a single channel: use it as coverage
        coverage = sprite.getchannel(band)
        sprite = Image.new('RGBA', sprite.size, (255, 255, 255, 0))
        sprite.putalpha(coverage)
    return sprite


def _tint(sprite, color):
    """Multiply sprite by colour."""
    color = tuple(color)
    if len(color) == 3:
        color += (255,)
    return ImageChops.multiply(sprite, Image.new('RGBA', sprite.size, color))


def _rotate(sprite, rotation):
    """Rotate sprite about its top-left corner; return sprite and offset of new corner."""
    width, height = sprite.size
    cos_r, sin_r = cos(rotation), sin(rotation)
    corners = ((0, 0), (width, 0), (0, height), (width, height))
    offset_x = min(_x*cos_r - _y*sin_r for _x, _y in corners)
    offset_y = min(_x*sin_r + _y*cos_r for _x, _y in corners)
    # PIL rotates counterclockwise; screen y axis points down
    sprite = sprite.rotate(-degrees(rotation), resample=Image.NEAREST, expand=True)
    return sprite, (round(offset_x), round(offset_y))


def draw_string(image, font, text, position=(0, 0), color=None, *, rotation=0.0, scale=1):
    """
    Draw text on a PIL image using the font's atlas texture; return the measured size.

    image: target PIL image
    font: FontMetrics whose texture is a PIL image or a sequence of page images
    position: location of the text origin on the image
    color: colour to tint the glyphs with; None for no tint
    rotation: angle in radians to rotate the text about its origin
    scale: scale factor, as a number or (x, y) pair
    """
    require('draw_string', image=image, font=font, text=text)
    # unresolved characters raise before anything is drawn
    size = font.measure(text)
    common = font.data.common
    for inst in iter_draw_instructions(
            font, text, position, rotation=rotation, scale=scale
        ):
        if not inst.dest.width or not inst.dest.height:
            continue
        atlas = get_page(font.texture, inst.page)
        sprite = _glyph_sprite(atlas, font.characters[inst.char], common)
        if sprite.size != (inst.dest.width, inst.dest.height):
            sprite = sprite.resize(
                (inst.dest.width, inst.dest.height), resample=Image.NEAREST
            )
        if color is not None:
            sprite = _tint(sprite, color)
        x, y = inst.dest.x, inst.dest.y
        if rotation:
            sprite, (offset_x, offset_y) = _rotate(sprite, rotation)
            x, y = x + offset_x, y + offset_y
        image.paste(sprite.convert(image.mode), (x, y), sprite.getchannel('A'))
    return size


def render_text(font, text, *, paper=(0, 0, 0, 0), color=None, margin=(0, 0)):
    """Render text to a new RGBA image sized to fit it."""
    require('render_text', font=font, text=text)
    margin = Coord.create(margin)
    width, height = font.measure(text)
    image = Image.new(
        'RGBA', (width + 2*margin.x, height + 2*margin.y), tuple(paper)
    )
    draw_string(image, font, text, margin, color)
    return image
