"""Tests for the supported-language listing."""

import pytest

from shopvoice.voice.languages import SUPPORTED_LANGUAGES, is_supported, list_languages


class TestLanguages:
    def test_listing(self):
        languages = list_languages()
        assert len(languages) == len(SUPPORTED_LANGUAGES) == 9
        assert languages[0] == {"code": "en-US", "display_name": "English (US)", "icon": "🇺🇸"}

    def test_codes_unique(self):
        codes = [entry["code"] for entry in list_languages()]
        assert len(codes) == len(set(codes))

    @pytest.mark.parametrize("tag", ["en", "es-MX", "ja-JP", "zh"])
    def test_supported(self, tag):
        assert is_supported(tag)

    @pytest.mark.parametrize("tag", ["ru", "xp-XX"])
    def test_not_supported(self, tag):
        assert not is_supported(tag)
