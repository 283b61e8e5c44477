"""
Render a banner using a BMFont description and glyph atlas
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import json
import argparse
import logging
from pathlib import Path

from PIL import Image

from bmlayout.basetypes import Coord, RGB, to_number
from bmlayout.description import FontData
from bmlayout.metrics import FontMetrics
from bmlayout.draw import render_text
from bmlayout.scripting import wrap_main, unescape


def load_font(description, atlas=(), spacing=0, default_character=' '):
    """Load font metrics from a JSON description and its atlas page images."""
    path = Path(description)
    with open(path, 'r', encoding='utf-8') as infile:
        data = FontData.from_dict(json.load(infile))
    if atlas:
        files = [Path(_f) for _f in atlas]
    else:
        files = [path.parent / _page.file for _page in sorted(data.pages)]
    if not files:
        raise ValueError('No atlas image given or referenced in description.')
    logging.debug('Atlas pages: %s', ', '.join(str(_f) for _f in files))
    pages = []
    for file in files:
        with Image.open(file) as image:
            pages.append(image.copy())
    texture = pages[0] if len(pages) == 1 else pages
    return FontMetrics(
        texture, data, spacing=spacing, default_character=default_character
    )


def main():
    # parse command line
    parser = argparse.ArgumentParser()
    parser.add_argument(
        'description', type=str,
        help='BMFont description in JSON format'
    )
    parser.add_argument(
        'text', nargs='*', type=str,
        help=(
            'text to be rendered. '
            'multiple text arguments represent consecutive lines. '
            'if not given, read from standard input'
        )
    )
    parser.add_argument(
        '--atlas', '-a', nargs='*', type=str, default=(),
        help='atlas page image(s) (default: pages named in description)'
    )
    parser.add_argument(
        '--output', '-o', type=str, default='',
        help='output image file name (default: show image)'
    )
    parser.add_argument(
        '--spacing', type=to_number, default=0,
        help='extra pixels between characters (default: 0)'
    )
    parser.add_argument(
        '--line-spacing', type=int, default=None,
        help='pixels between base lines (default: line height from description)'
    )
    parser.add_argument(
        '--default-char', type=str, default=' ',
        help='character to draw in place of characters not in the font (default: space)'
    )
    parser.add_argument(
        '--no-default', action='store_true',
        help='fail on characters not in the font instead of replacing them'
    )
    parser.add_argument(
        '--margin', '-m', type=Coord.create, default=Coord(0, 0),
        help='margin in pixels in x and y direction (default: 0,0)'
    )
    parser.add_argument(
        '--ink', '--foreground', '-fg', type=RGB.create, default=None,
        help='colour to tint glyphs with (default: no tint)'
    )
    parser.add_argument(
        '--paper', '--background', '-bg', type=RGB.create, default=None,
        help='background colour (default: transparent)'
    )
    parser.add_argument(
        '--measure', action='store_true',
        help='only print the size of the rendered text'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    args = parser.parse_args()

    with wrap_main(args.debug):
        # read text from stdin if not supplied
        if not args.text:
            text = sys.stdin.read()
        else:
            # multiple arguments or \n give line breaks
            text = '\n'.join(args.text)
        text = unescape(text)
        default_character = None if args.no_default else unescape(args.default_char)
        font = load_font(
            args.description, args.atlas,
            spacing=args.spacing, default_character=default_character,
        )
        if args.line_spacing is not None:
            font.line_spacing = args.line_spacing
        if args.measure:
            sys.stdout.write(f'{font.measure(text)}\n')
            return
        paper = (0, 0, 0, 0) if args.paper is None else (*args.paper, 255)
        image = render_text(
            font, text, paper=paper, color=args.ink, margin=args.margin
        )
        if args.output:
            image.save(args.output)
        else:
            image.show()


if __name__ == '__main__':
    main()
