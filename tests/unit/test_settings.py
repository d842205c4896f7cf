"""
拡張機能設定のテスト
"""

import logging

from better_translate.core.settings import BetterTranslateSettings


class TestBetterTranslateSettings:
    """設定のテスト"""

    def test_defaults(self):
        """デフォルト設定"""
        settings = BetterTranslateSettings()

        assert settings.locale == "zh-cn"
        assert settings.request_timeout is None
        assert settings.use_pro_api is False
        assert settings.microsoft_url == "https://api.microsofttranslator.com/v2/ajax.svc/Translate"
        assert settings.google_url == "https://translate.googleapis.com/translate_a/single"
        assert settings.youdao_url == "https://fanyi.youdao.com/translate"
        assert settings.detect_url == "https://fanyi.youdao.com/translate"

    def test_deepl_url_switches_with_pro_api(self):
        """Free/Pro APIの切り替え"""
        assert BetterTranslateSettings().deepl_url == "https://api-free.deepl.com/v2/translate"
        assert BetterTranslateSettings(use_pro_api=True).deepl_url == "https://api.deepl.com/v2/translate"

    def test_from_dict(self):
        """辞書からの作成"""
        settings = BetterTranslateSettings.from_dict({"locale": "en", "request_timeout": 10})

        assert settings.locale == "en"
        assert settings.request_timeout == 10

    def test_from_dict_ignores_unknown_keys(self, caplog):
        """未知の項目は警告して無視"""
        with caplog.at_level(logging.WARNING):
            settings = BetterTranslateSettings.from_dict({"locale": "en", "theme": "dark"})

        assert settings.locale == "en"
        assert "theme" in caplog.text

    def test_round_trip(self):
        """to_dict/from_dictで値が保たれる"""
        original = BetterTranslateSettings(locale="en", use_pro_api=True, request_timeout=5.0)

        assert BetterTranslateSettings.from_dict(original.to_dict()) == original
