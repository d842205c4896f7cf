"""
DeepL API プロバイダの実装
"""

import logging

from ..exceptions import MissingApiKeyError
from ..models import ServiceType
from .base import BaseTranslateProvider


class DeepLProvider(BaseTranslateProvider):
    """DeepL APIプロバイダ"""

    service = ServiceType.DEEPL
    unavailable_message = "DeepL翻译服务暂时不可用"
    missing_key_message = "请先设置DeepL API密钥"
    invalid_key_message = "DeepL API密钥无效"

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """翻訳実行"""
        api_key = self._api_key()
        if not api_key:
            raise MissingApiKeyError(self.missing_key_message, service=self.service.value)

        headers = {
            "Authorization": f"DeepL-Auth-Key {api_key}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        data = {
            "text": text,
            "source_lang": self._convert_language_code(source_language),
            "target_lang": self._convert_language_code(target_language),
        }
        response = self._request("POST", self.settings.deepl_url, headers=headers, data=data)

        result = self._parse_json(response)
        translated = self._extract(result, lambda body: body["translations"][0]["text"])
        logging.info(f"DeepL 翻訳完了: {source_language} -> {target_language}")
        return translated

    def _http_error_message(self, status_code: int) -> str:
        if status_code == 403:
            return self.invalid_key_message
        return self.unavailable_message

    def _http_error_code(self, status_code: int) -> str:
        if status_code == 403:
            return "INVALID_API_KEY"
        return "HTTP_ERROR"

    def _convert_language_code(self, lang_code: str) -> str:
        """言語コードをDeepL形式に変換"""
        return lang_code.upper()
