"""
言語検出機能の実装（有道翻訳の自動判定を利用）
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from ..settings import BetterTranslateSettings
from .provider_youdao import youdao_params


DETECTION_FAILED_MESSAGE = "语言检测失败"


@dataclass
class LanguageDetectionResult:
    """言語検出結果"""
    language: str
    target_language: Optional[str]
    raw_type: str


class LanguageDetectionError(Exception):
    """言語検出関連エラー"""

    def __init__(self, message: str = DETECTION_FAILED_MESSAGE, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.original_error = original_error


class LanguageDetector:
    """言語検出器"""

    # type フィールドは "en2zh-CHS" の形式
    TYPE_SEPARATOR = "2"

    def __init__(self, session: requests.Session, settings: BetterTranslateSettings):
        self.session = session
        self.settings = settings

    def detect_language(self, text: str) -> LanguageDetectionResult:
        """
        テキストの言語を検出

        Args:
            text: 検出対象のテキスト

        Returns:
            検出結果

        Raises:
            LanguageDetectionError: 通信・解析に失敗した場合
        """
        try:
            response = self.session.get(
                self.settings.detect_url,
                params=youdao_params(text),
                timeout=self.settings.request_timeout
            )
            response.raise_for_status()
            data = response.json()
            raw_type = data["type"]
        except (requests.exceptions.RequestException, ValueError, KeyError, TypeError) as e:
            logging.warning(f"言語検出に失敗: {e!r}")
            raise LanguageDetectionError(original_error=e)

        if not isinstance(raw_type, str) or not raw_type:
            raise LanguageDetectionError()

        source, _, target = raw_type.partition(self.TYPE_SEPARATOR)
        logging.info(f"言語検出完了: {raw_type}")
        return LanguageDetectionResult(
            language=source,
            target_language=target or None,
            raw_type=raw_type
        )
