"""
bmlayout test suite
font description tests
"""

import copy
import unittest

from bmlayout import (
    FontData, FontInfo, FontPage, Glyph, KerningPair,
    DescriptionError, InvalidArgument, Rect,
)
from .base import BaseTester, TEST_FONT


class TestDescription(BaseTester):
    """Test building descriptions from parsed mappings."""

    def test_from_dict(self):
        data = FontData.from_dict(TEST_FONT)
        assert data.common.lineHeight == 16
        assert data.common.scaleW == 64
        assert data.pages == (FontPage(0, 'test_0.png'),)
        assert len(data.chars) == 5
        assert data.kernings[0] == KerningPair(65, 86, -2)

    def test_glyph(self):
        glyph = FontData.from_dict(TEST_FONT).chars[1]
        assert glyph == Glyph(65, 0, 0, 8, 20, 1, -2, 10, 0, 15)
        assert glyph.char == 'A'
        assert glyph.source == Rect(0, 0, 8, 20)

    def test_string_values(self):
        description = copy.deepcopy(TEST_FONT)
        description['chars'][1] = {
            _k: str(_v) for _k, _v in description['chars'][1].items()
        }
        glyph = FontData.from_dict(description).chars[1]
        assert glyph.yoffset == -2

    def test_info(self):
        info = FontData.from_dict(TEST_FONT).info
        assert info.face == 'Test'
        assert info.size == 16
        assert info.padding == (0, 0, 0, 0)
        assert info.spacing == (1, 1)
        assert info.unicode == 1

    def test_info_booleans(self):
        info = FontInfo.create(bold='true', italic='False', padding=[1, 2, 3, 4])
        assert info.bold == 1
        assert info.italic == 0
        assert info.padding == (1, 2, 3, 4)

    def test_info_unknown_field(self):
        info = FontInfo.create(face='X', fontfile='x.ttf')
        assert info.face == 'X'

    def test_page_dicts(self):
        description = copy.deepcopy(TEST_FONT)
        description['pages'] = [{'id': '1', 'file': 'b.png'}, {'id': '0', 'file': 'a.png'}]
        data = FontData.from_dict(description)
        assert sorted(data.pages) == [FontPage(0, 'a.png'), FontPage(1, 'b.png')]

    def test_no_kernings(self):
        description = copy.deepcopy(TEST_FONT)
        del description['kernings']
        assert FontData.from_dict(description).kernings == ()

    def test_unknown_glyph_fields_ignored(self):
        description = copy.deepcopy(TEST_FONT)
        description['chars'][0]['letter'] = 'space'
        assert FontData.from_dict(description).chars[0].id == 32

    def test_missing_section(self):
        description = copy.deepcopy(TEST_FONT)
        del description['common']
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)

    def test_missing_glyph_id(self):
        description = copy.deepcopy(TEST_FONT)
        del description['chars'][0]['id']
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)

    def test_invalid_number(self):
        description = copy.deepcopy(TEST_FONT)
        description['kernings'][0]['amount'] = 'lots'
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)

    def test_invalid_info(self):
        with self.assertRaises(DescriptionError):
            FontInfo.create(size='x')
        with self.assertRaises(DescriptionError):
            FontInfo.create(padding='1,a,3,4')
        description = copy.deepcopy(TEST_FONT)
        description['info']['size'] = 'x'
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)

    def test_invalid_page(self):
        description = copy.deepcopy(TEST_FONT)
        description['pages'] = [{'id': '0'}]
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)
        description['pages'] = [{'id': 'zero', 'file': 'a.png'}]
        with self.assertRaises(DescriptionError):
            FontData.from_dict(description)

    def test_none(self):
        with self.assertRaises(InvalidArgument):
            FontData.from_dict(None)


if __name__ == '__main__':
    unittest.main()
