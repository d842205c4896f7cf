"""
翻訳プロバイダの共通処理
"""

import logging
from typing import Any, Callable, Optional

import requests

from ..exceptions import ProviderRequestError, ResponseFormatError
from ..models import ApiKeys, ServiceType
from ..settings import BetterTranslateSettings


logger = logging.getLogger(__name__)


class BaseTranslateProvider:
    """HTTP翻訳プロバイダの基底クラス

    サブクラスは ``service`` と ``unavailable_message`` を定義し、
    ``translate`` で1回だけリクエストを発行する。
    """

    service: ServiceType
    unavailable_message = "翻译服务暂时不可用"

    def __init__(self, session: requests.Session, settings: BetterTranslateSettings, api_keys: ApiKeys):
        self.session = session
        self.settings = settings
        self.api_keys = api_keys

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """1件のテキストを翻訳"""
        raise NotImplementedError

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        """リクエスト送信（通信エラーとHTTPエラーを変換）"""
        try:
            response = self.session.request(method, url, timeout=self.settings.request_timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.warning(f"{self.service.value}: リクエストがタイムアウトしました")
            raise ProviderRequestError(
                self.unavailable_message, "TIMEOUT", self.service.value, original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"{self.service.value}: 接続エラー: {e}")
            raise ProviderRequestError(
                self.unavailable_message, "NETWORK_ERROR", self.service.value, original_error=e
            )
        except ValueError as e:
            # 送信前のエンコード失敗（孤立サロゲートなど）
            logger.warning(f"{self.service.value}: リクエストを作成できません: {e}")
            raise ProviderRequestError(
                self.unavailable_message, "INVALID_REQUEST", self.service.value, original_error=e
            )

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = getattr(response, "status_code", 0)
            logger.warning(f"{self.service.value}: HTTP {status_code}")
            raise ProviderRequestError(
                self._http_error_message(status_code),
                self._http_error_code(status_code),
                self.service.value,
                status_code=status_code,
                original_error=e
            )

        return response

    def _http_error_message(self, status_code: int) -> str:
        return self.unavailable_message

    def _http_error_code(self, status_code: int) -> str:
        return "HTTP_ERROR"

    def _parse_json(self, response: requests.Response) -> Any:
        """JSONレスポンスを解析"""
        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(self.unavailable_message, service=self.service.value, original_error=e)

    def _extract(self, data: Any, extractor: Callable[[Any], Any]) -> str:
        """レスポンスから翻訳文字列を取り出す"""
        try:
            value = extractor(data)
        except (KeyError, IndexError, TypeError) as e:
            logger.warning(f"{self.service.value}: 想定外のレスポンス形式: {e!r}")
            raise ResponseFormatError(self.unavailable_message, service=self.service.value, original_error=e)

        if not isinstance(value, str):
            raise ResponseFormatError(self.unavailable_message, service=self.service.value)
        return value

    def _api_key(self) -> Optional[str]:
        return self.api_keys.get(self.service)
