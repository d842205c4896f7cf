"""
Google翻訳（translate_a/single, gtxクライアント）プロバイダの実装
"""

import logging

from ..models import ServiceType
from .base import BaseTranslateProvider


class GoogleTranslateProvider(BaseTranslateProvider):
    """Google翻訳プロバイダ"""

    service = ServiceType.GOOGLE
    unavailable_message = "Google翻译服务暂时不可用"

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """翻訳実行"""
        params = {
            "client": "gtx",
            "sl": source_language,
            "tl": target_language,
            "dt": "t",
            "q": text,
        }
        response = self._request("GET", self.settings.google_url, params=params)

        # [[["訳文", "原文", ...], ...], ...]
        data = self._parse_json(response)
        translated = self._extract(data, lambda body: body[0][0][0])
        logging.info(f"Google 翻訳完了: {source_language} -> {target_language}")
        return translated
