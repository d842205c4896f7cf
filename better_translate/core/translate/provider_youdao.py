"""
有道翻訳プロバイダの実装
"""

import logging

from ..models import ServiceType
from .base import BaseTranslateProvider


class YoudaoTranslateProvider(BaseTranslateProvider):
    """有道翻訳プロバイダ

    エンドポイントが言語を自動判定するため、言語コードはリクエストに含めない。
    """

    service = ServiceType.YOUDAO
    unavailable_message = "有道翻译服务暂时不可用"

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """翻訳実行"""
        response = self._request("GET", self.settings.youdao_url, params=youdao_params(text))

        data = self._parse_json(response)
        translated = self._extract(data, lambda body: body["translateResult"][0][0]["tgt"])
        logging.info(f"有道 翻訳完了: type={data.get('type') if isinstance(data, dict) else None}")
        return translated


def youdao_params(text: str) -> dict:
    """有道エンドポイントのクエリパラメータ"""
    return {
        "doctype": "json",
        "type": "AUTO",
        "i": text,
    }
