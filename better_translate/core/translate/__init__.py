"""
翻訳システムの統合インターフェース
"""

from .base import BaseTranslateProvider
from .language_detector import (
    LanguageDetectionError,
    LanguageDetectionResult,
    LanguageDetector,
)
from .provider_deepl import DeepLProvider
from .provider_google import GoogleTranslateProvider
from .provider_microsoft import MicrosoftTranslateProvider
from .provider_router import PROVIDER_CLASSES, TranslationProviderRouter
from .provider_youdao import YoudaoTranslateProvider

__all__ = [
    # Router
    "TranslationProviderRouter",
    "PROVIDER_CLASSES",
    # Providers
    "BaseTranslateProvider",
    "MicrosoftTranslateProvider",
    "DeepLProvider",
    "GoogleTranslateProvider",
    "YoudaoTranslateProvider",
    # Language Detection
    "LanguageDetector",
    "LanguageDetectionResult",
    "LanguageDetectionError",
]
