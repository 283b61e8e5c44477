"""
bmlayout test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

from PIL import Image

from bmlayout import FontData, FontMetrics


# glyph atlas rectangles are filled with opaque white on a transparent sheet
ATLAS_SIZE = (64, 32)

TEST_FONT = {
    'info': {
        'face': 'Test', 'size': '16', 'bold': '0', 'italic': '0',
        'charset': '', 'unicode': '1', 'stretchH': '100', 'smooth': '0',
        'aa': '1', 'padding': '0,0,0,0', 'spacing': '1,1',
    },
    'common': {
        'lineHeight': '16', 'base': '13', 'scaleW': '64', 'scaleH': '32',
        'pages': '1', 'packed': '0',
        'alphaChnl': '0', 'redChnl': '4', 'greenChnl': '4', 'blueChnl': '4',
    },
    'pages': ['test_0.png'],
    'chars': [
        {'id': 32, 'x': 0, 'y': 0, 'width': 0, 'height': 0,
         'xoffset': 0, 'yoffset': 0, 'xadvance': 5, 'page': 0, 'chnl': 15},
        {'id': 65, 'x': 0, 'y': 0, 'width': 8, 'height': 20,
         'xoffset': 1, 'yoffset': -2, 'xadvance': 10, 'page': 0, 'chnl': 15},
        {'id': 66, 'x': 8, 'y': 0, 'width': 10, 'height': 18,
         'xoffset': 0, 'yoffset': 0, 'xadvance': 12, 'page': 0, 'chnl': 15},
        {'id': 86, 'x': 18, 'y': 0, 'width': 9, 'height': 16,
         'xoffset': 0, 'yoffset': 1, 'xadvance': 9, 'page': 0, 'chnl': 15},
        {'id': 63, 'x': 27, 'y': 0, 'width': 4, 'height': 10,
         'xoffset': 0, 'yoffset': 3, 'xadvance': 6, 'page': 0, 'chnl': 15},
    ],
    'kernings': [
        {'first': 65, 'second': 86, 'amount': -2},
        {'first': 86, 'second': 65, 'amount': -3},
    ],
}


def create_atlas(description=TEST_FONT, color=(255, 255, 255, 255)):
    """Create atlas image with every glyph rectangle filled."""
    atlas = Image.new('RGBA', ATLAS_SIZE, (0, 0, 0, 0))
    for char in description['chars']:
        if char['width'] and char['height']:
            box = (
                char['x'], char['y'],
                char['x'] + char['width'], char['y'] + char['height']
            )
            atlas.paste(color, box)
    return atlas


def create_font(description=TEST_FONT, texture=None, **kwargs):
    """Create font metrics from description dict."""
    if texture is None:
        texture = create_atlas(description)
    return FontMetrics(texture, FontData.from_dict(description), **kwargs)


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)
        self.font = create_font()

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()
