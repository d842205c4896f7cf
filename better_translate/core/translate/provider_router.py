"""
翻訳プロバイダールーター
Microsoft・DeepL・Google・有道の各プロバイダを統一インターフェースで呼び分ける
"""

import logging
from typing import Any, Dict, Optional, Type

import requests

from ..error_handler import ErrorHandler
from ..exceptions import TranslationError
from ..models import ApiKeys, ServiceType, TranslationResult, resolve_language_code
from ..settings import BetterTranslateSettings
from .base import BaseTranslateProvider
from .provider_deepl import DeepLProvider
from .provider_google import GoogleTranslateProvider
from .provider_microsoft import MicrosoftTranslateProvider
from .provider_youdao import YoudaoTranslateProvider


PROVIDER_CLASSES: Dict[ServiceType, Type[BaseTranslateProvider]] = {
    ServiceType.MICROSOFT: MicrosoftTranslateProvider,
    ServiceType.DEEPL: DeepLProvider,
    ServiceType.GOOGLE: GoogleTranslateProvider,
    ServiceType.YOUDAO: YoudaoTranslateProvider,
}


class TranslationProviderRouter:
    """翻訳プロバイダールーター"""

    def __init__(self,
                 session: requests.Session,
                 settings: BetterTranslateSettings,
                 api_keys: ApiKeys,
                 error_handler: Optional[ErrorHandler] = None):
        self.settings = settings
        self.api_keys = api_keys
        self.error_handler = error_handler or ErrorHandler()
        self.providers: Dict[ServiceType, BaseTranslateProvider] = {
            service: provider_class(session, settings, api_keys)
            for service, provider_class in PROVIDER_CLASSES.items()
        }

    def get_provider(self, service: ServiceType) -> BaseTranslateProvider:
        """サービスに対応するプロバイダを取得"""
        return self.providers[service]

    def translate_text(self, service_name: Any, text: str, from_name: Any, to_name: Any) -> TranslationResult:
        """翻訳実行（例外は送出せず、結果オブジェクトで返す）"""
        service: Optional[ServiceType] = None
        source_code: Optional[str] = None
        target_code: Optional[str] = None

        try:
            service = ServiceType.from_name(service_name)
            source_code = resolve_language_code(from_name)
            target_code = resolve_language_code(to_name)

            translated = self.get_provider(service).translate(text, source_code, target_code)
            return TranslationResult(
                text=translated,
                service=service,
                source_language=source_code,
                target_language=target_code,
                success=True
            )

        except TranslationError as e:
            error = e
        except Exception as e:
            logging.exception(f"翻訳中に予期しないエラー: {e}")
            error = TranslationError(str(e), "UNEXPECTED", original_error=e)

        self.error_handler.handle_error(error, {
            "service": service.value if service else service_name,
            "from": source_code,
            "to": target_code,
        })
        return TranslationResult.failed(error, service, source_code, target_code)

    def set_api_key(self, service_name: Any, key: Any) -> bool:
        """APIキーを設定（未対応サービスはFalse）"""
        try:
            service = ServiceType.from_key_name(service_name)
        except TranslationError:
            logging.warning(f"APIキー設定: 未対応のサービス {service_name!r}")
            return False

        self.api_keys.set(service, key)
        logging.info(f"APIキー設定完了: {service.value}")
        return True
