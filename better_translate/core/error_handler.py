"""
エラーハンドリングとユーザー向けメッセージ生成

プロバイダ内部の型付きエラーを、ホストに表示する文字列へ変換する。
"""

import logging
from datetime import datetime
from typing import Optional, Dict, Any, List, Union

from .exceptions import (
    MissingApiKeyError,
    ProviderRequestError,
    ResponseFormatError,
    TranslationError,
    UnsupportedLanguageError,
    UnsupportedServiceError,
)
from .models import TranslationResult


TRANSLATION_ERROR_PREFIX = "翻译错误"


class ErrorSeverity:
    """エラー重要度の定義"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory:
    """エラーカテゴリの定義"""
    CREDENTIAL = "credential"
    NETWORK = "network"
    RESPONSE = "response"
    USER_INPUT = "user_input"
    SYSTEM = "system"


class ErrorInfo:
    """エラー情報を格納するクラス"""

    def __init__(self,
                 message: str,
                 category: str = ErrorCategory.SYSTEM,
                 severity: str = ErrorSeverity.ERROR,
                 error_code: str = "",
                 technical_details: Optional[str] = None):
        self.message = message
        self.category = category
        self.severity = severity
        self.error_code = error_code
        self.technical_details = technical_details
        self.timestamp = datetime.now()


class ErrorHandler:
    """統合エラーハンドラー"""

    def __init__(self, max_history: int = 50):
        self.logger = logging.getLogger(__name__)

        # エラー統計
        self.error_count = 0
        self.error_history: List[ErrorInfo] = []
        self.max_history = max_history

    def handle_error(self,
                     error: Union[Exception, ErrorInfo],
                     context: Optional[Dict[str, Any]] = None) -> ErrorInfo:
        """エラーを記録し、ErrorInfoを返す"""
        context = context or {}

        if isinstance(error, Exception):
            error_info = self._exception_to_error_info(error)
        else:
            error_info = error

        self._log_error(error_info, context)
        return error_info

    def _exception_to_error_info(self, exception: Exception) -> ErrorInfo:
        """例外をErrorInfoオブジェクトに変換"""
        if isinstance(exception, MissingApiKeyError):
            category, severity = ErrorCategory.CREDENTIAL, ErrorSeverity.WARNING
        elif isinstance(exception, ProviderRequestError):
            category, severity = ErrorCategory.NETWORK, ErrorSeverity.ERROR
        elif isinstance(exception, ResponseFormatError):
            category, severity = ErrorCategory.RESPONSE, ErrorSeverity.ERROR
        elif isinstance(exception, (UnsupportedServiceError, UnsupportedLanguageError)):
            category, severity = ErrorCategory.USER_INPUT, ErrorSeverity.WARNING
        else:
            category, severity = ErrorCategory.SYSTEM, ErrorSeverity.ERROR

        technical_details = f"{type(exception).__name__}: {str(exception)}"
        original_error = getattr(exception, "original_error", None)
        if original_error is not None:
            technical_details += f" (原因: {type(original_error).__name__}: {original_error})"

        return ErrorInfo(
            message=str(exception),
            category=category,
            severity=severity,
            error_code=getattr(exception, "error_code", ""),
            technical_details=technical_details
        )

    def _log_error(self, error_info: ErrorInfo, context: Dict[str, Any]):
        """エラーをログに記録"""

        self.error_count += 1
        self.error_history.append(error_info)
        if len(self.error_history) > self.max_history:
            del self.error_history[:-self.max_history]

        log_level = {
            ErrorSeverity.INFO: logging.INFO,
            ErrorSeverity.WARNING: logging.WARNING,
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.CRITICAL: logging.CRITICAL
        }.get(error_info.severity, logging.ERROR)

        log_message = f"[{error_info.category}] {error_info.message}"
        if context:
            log_message += f" (コンテキスト: {context})"
        if error_info.technical_details:
            log_message += f" - 詳細: {error_info.technical_details}"

        self.logger.log(log_level, log_message)

    def get_error_summary(self) -> Dict[str, Any]:
        """エラー統計のサマリーを取得"""
        category_counts: Dict[str, int] = {}
        severity_counts: Dict[str, int] = {}

        for error in self.error_history:
            category_counts[error.category] = category_counts.get(error.category, 0) + 1
            severity_counts[error.severity] = severity_counts.get(error.severity, 0) + 1

        return {
            "total_errors": self.error_count,
            "recent_errors": len(self.error_history[-10:]),
            "category_breakdown": category_counts,
            "severity_breakdown": severity_counts,
            "last_error": self.error_history[-1] if self.error_history else None
        }


def render_error_message(error: Exception) -> str:
    """エラーをホスト表示用の文字列に変換"""
    if isinstance(error, UnsupportedServiceError):
        return str(error)
    return f"{TRANSLATION_ERROR_PREFIX}: {error}"


def render_result(result: TranslationResult) -> str:
    """翻訳結果をホスト表示用の文字列に変換"""
    if result.success:
        return result.text
    if result.error is None:
        return render_error_message(TranslationError("未知错误"))
    return render_error_message(result.error)
