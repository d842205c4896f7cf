"""
翻訳処理のエラー定義
"""

from typing import Optional


class TranslationError(Exception):
    """翻訳関連エラーの基底クラス"""

    error_code = "TRANSLATION_FAILED"

    def __init__(self, message: str, error_code: str = "", service: Optional[str] = None,
                 original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.service = service
        self.original_error = original_error


class MissingApiKeyError(TranslationError):
    """APIキー未設定エラー"""

    error_code = "MISSING_API_KEY"


class ProviderRequestError(TranslationError):
    """通信エラー（接続失敗・HTTPエラー）"""

    error_code = "NETWORK_ERROR"

    def __init__(self, message: str, error_code: str = "", service: Optional[str] = None,
                 status_code: int = 0, original_error: Optional[Exception] = None):
        super().__init__(message, error_code, service, original_error)
        self.status_code = status_code


class ResponseFormatError(TranslationError):
    """レスポンス形式エラー"""

    error_code = "INVALID_RESPONSE"


class UnsupportedServiceError(TranslationError):
    """未対応の翻訳サービス"""

    error_code = "UNSUPPORTED_SERVICE"


class UnsupportedLanguageError(TranslationError):
    """未対応の言語名"""

    error_code = "UNSUPPORTED_LANGUAGE"

    def __init__(self, language_name, original_error: Optional[Exception] = None):
        super().__init__(f"不支持的语言: {language_name}", original_error=original_error)
        self.language_name = language_name
