"""
翻訳プロバイダールーターのテスト
"""

from unittest.mock import patch

import pytest
import requests

from better_translate.core.exceptions import (
    MissingApiKeyError,
    ProviderRequestError,
    TranslationError,
    UnsupportedLanguageError,
    UnsupportedServiceError,
)
from better_translate.core.models import ServiceType
from better_translate.core.translate import (
    PROVIDER_CLASSES,
    MicrosoftTranslateProvider,
    TranslationProviderRouter,
)


@pytest.fixture
def router(session, settings, api_keys):
    """テスト用ルーター"""
    return TranslationProviderRouter(session, settings, api_keys)


class TestDispatch:
    """サービスごとの呼び分けのテスト"""

    def test_registry_covers_all_services(self):
        """すべてのサービスにプロバイダが登録されている"""
        assert set(PROVIDER_CLASSES) == set(ServiceType)

    @pytest.mark.parametrize("service_name, expected_url", [
        ("Microsoft", "https://api.microsofttranslator.com/v2/ajax.svc/Translate"),
        ("Google", "https://translate.googleapis.com/translate_a/single"),
        ("Youdao", "https://fanyi.youdao.com/translate"),
    ])
    def test_one_request_per_translation(self, router, session, make_response, service_name, expected_url):
        """1回の翻訳で1回だけリクエストする"""
        session.request.return_value = make_response(
            {"translateResult": [[{"tgt": "你好"}]]} if service_name == "Youdao" else [[["你好"]]],
            text='"你好"'
        )

        result = router.translate_text(service_name, "Hello", "英语", "简体中文")

        assert result.success
        assert result.text == "你好"
        assert result.service is ServiceType.from_name(service_name)
        assert result.source_language == "en"
        assert result.target_language == "zh"
        session.request.assert_called_once()
        assert session.request.call_args.args[1] == expected_url

    def test_deepl_uses_stored_key(self, router, session, api_keys, make_response):
        """DeepLは保存済みのキーを使う"""
        router.set_api_key("deepl", "k-123")
        session.request.return_value = make_response({"translations": [{"text": "Bonjour"}]})

        result = router.translate_text("DeepL", "Hello", "英语", "法语")

        assert result.text == "Bonjour"
        assert session.request.call_args.kwargs["headers"]["Authorization"] == "DeepL-Auth-Key k-123"

    def test_unsupported_service(self, router, session):
        """未対応サービスはリクエストせずに失敗"""
        result = router.translate_text("Baidu", "Hello", "英语", "简体中文")

        assert not result.success
        assert isinstance(result.error, UnsupportedServiceError)
        session.request.assert_not_called()

    @pytest.mark.parametrize("from_name, to_name", [("Klingon", "简体中文"), ("英语", None)])
    def test_unsupported_language(self, router, session, from_name, to_name):
        """未登録の言語名はリクエストせずに失敗"""
        result = router.translate_text("Google", "Hello", from_name, to_name)

        assert not result.success
        assert isinstance(result.error, UnsupportedLanguageError)
        assert result.service is ServiceType.GOOGLE
        session.request.assert_not_called()


class TestFailures:
    """失敗時の結果のテスト"""

    def test_missing_deepl_key(self, router, session):
        """DeepLキー未設定"""
        result = router.translate_text("DeepL", "Hello", "英语", "简体中文")

        assert isinstance(result.error, MissingApiKeyError)
        session.request.assert_not_called()

    def test_network_failure_is_returned_not_raised(self, router, session):
        """通信エラーは例外ではなく結果として返す"""
        session.request.side_effect = requests.exceptions.ConnectionError("down")

        result = router.translate_text("Google", "Hello", "英语", "简体中文")

        assert not result.success
        assert isinstance(result.error, ProviderRequestError)
        assert str(result.error) == "Google翻译服务暂时不可用"

    def test_unexpected_exception_is_wrapped(self, router):
        """予期しない例外もTranslationErrorに包む"""
        with patch.object(MicrosoftTranslateProvider, "translate", side_effect=RuntimeError("bug")):
            result = router.translate_text("Microsoft", "Hello", "英语", "简体中文")

        assert not result.success
        assert type(result.error) is TranslationError
        assert isinstance(result.error.original_error, RuntimeError)

    def test_errors_are_recorded(self, router, session):
        """エラーハンドラーに記録される"""
        router.translate_text("Baidu", "Hello", "英语", "简体中文")
        router.translate_text("DeepL", "Hello", "英语", "简体中文")

        summary = router.error_handler.get_error_summary()
        assert summary["total_errors"] == 2


class TestSetApiKey:
    """APIキー設定のテスト"""

    @pytest.mark.parametrize("service_name", ["DeepL", "deepl", "DEEPL"])
    def test_supported_service(self, router, api_keys, service_name):
        """大文字小文字を問わず設定できる"""
        assert router.set_api_key(service_name, "secret") is True
        assert api_keys.deepl == "secret"

    def test_other_providers_have_slots(self, router, api_keys):
        """各サービスにキーの枠がある"""
        assert router.set_api_key("Microsoft", "app-id") is True
        assert api_keys.microsoft == "app-id"

    @pytest.mark.parametrize("service_name", ["Baidu", "", None, 3])
    def test_unsupported_service(self, router, api_keys, service_name):
        """未対応サービスはFalseで、キーは変わらない"""
        api_keys.deepl = "keep"
        before = api_keys.to_dict()

        assert router.set_api_key(service_name, "secret") is False
        assert api_keys.to_dict() == before

    def test_last_write_wins(self, router, api_keys):
        """後から設定したキーが有効"""
        router.set_api_key("DeepL", "first")
        router.set_api_key("DeepL", "second")

        assert api_keys.deepl == "second"
