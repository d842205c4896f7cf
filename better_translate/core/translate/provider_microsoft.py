"""
Microsoft Translator (v2 AJAX) プロバイダの実装
"""

import logging

from ..exceptions import ResponseFormatError
from ..models import ServiceType
from .base import BaseTranslateProvider


class MicrosoftTranslateProvider(BaseTranslateProvider):
    """Microsoft Translatorプロバイダ"""

    service = ServiceType.MICROSOFT
    unavailable_message = "Microsoft翻译服务暂时不可用"

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """翻訳実行"""
        params = {
            "appId": self._api_key() or "",
            "text": text,
            "from": source_language,
            "to": target_language,
        }
        response = self._request("GET", self.settings.microsoft_url, params=params)

        translated = self._strip_quotes(response.text)
        logging.info(f"Microsoft 翻訳完了: {source_language} -> {target_language}")
        return translated

    def _strip_quotes(self, body: str) -> str:
        """レスポンス本文（JSON文字列）から前後の引用符を除去"""
        if not isinstance(body, str):
            raise ResponseFormatError(self.unavailable_message, service=self.service.value)

        # BOM付きで返ることがある
        body = body.lstrip("\ufeff")
        if len(body) >= 2 and body[0] == '"' and body[-1] == '"':
            return body[1:-1]
        return body
