"""
Better Translate: ブロック実行環境向けの翻訳拡張機能
"""

from .core.exceptions import (
    MissingApiKeyError,
    ProviderRequestError,
    ResponseFormatError,
    TranslationError,
    UnsupportedLanguageError,
    UnsupportedServiceError,
)
from .core.models import LANGUAGE_CODES, ApiKeys, ServiceType, TranslationResult
from .core.settings import BetterTranslateSettings
from .extension import (
    EXTENSION_INFO,
    MESSAGES,
    BetterTranslate,
    create_extension,
    default_format_message_factory,
)

__version__ = "1.0.0"

__all__ = [
    "BetterTranslate",
    "create_extension",
    "default_format_message_factory",
    "EXTENSION_INFO",
    "MESSAGES",
    "BetterTranslateSettings",
    "ApiKeys",
    "ServiceType",
    "TranslationResult",
    "LANGUAGE_CODES",
    "TranslationError",
    "MissingApiKeyError",
    "ProviderRequestError",
    "ResponseFormatError",
    "UnsupportedServiceError",
    "UnsupportedLanguageError",
]
