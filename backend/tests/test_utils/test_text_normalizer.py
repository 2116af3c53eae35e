"""
Unit tests for normalize_text
"""
import pytest

from catalog_search.utils.text import normalize_text


class TestNormalizeText:
    """Test text normalization"""

    def test_empty_and_none_return_empty_string(self):
        assert normalize_text(None) == ''
        assert normalize_text('') == ''

    def test_lowercases(self):
        assert normalize_text('RaDaR') == 'radar'

    def test_removes_diacritics(self):
        assert normalize_text('Añádir') == 'anadir'
        assert normalize_text('Canción ÜBER') == 'cancionuber'

    def test_removes_non_alphanumeric(self):
        assert normalize_text('A man, a plan, a canal: Panama') == 'amanaplanacanalpanama'
        assert normalize_text('  1-2_3 !? ') == '123'

    def test_drops_non_latin_characters(self):
        assert normalize_text('日本 abc ß') == 'abc'

    @pytest.mark.parametrize('text', [
        'Añádir', 'A man, a plan, a canal: Panama', '  Reconocer  ', 'Ñandú 2024', '', '!!!'
    ])
    def test_is_idempotent(self, text):
        once = normalize_text(text)
        assert normalize_text(once) == once
