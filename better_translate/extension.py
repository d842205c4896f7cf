"""
ブロック実行環境向けの翻訳拡張機能

ホストは ``get_info()`` の記述子でブロックを描画し、
``run_block(opcode, args)`` で各ブロックを実行する。
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

import requests

from .core.error_handler import ErrorHandler, render_result
from .core.models import LANGUAGE_CODES, ApiKeys, ServiceType
from .core.settings import BetterTranslateSettings
from .core.translate.language_detector import (
    DETECTION_FAILED_MESSAGE,
    LanguageDetectionError,
    LanguageDetector,
)
from .core.translate.provider_router import TranslationProviderRouter


MessageFormatter = Callable[[Dict[str, str]], str]
FormatMessageFactory = Callable[[Dict[str, Dict[str, str]]], MessageFormatter]

EXTENSION_ID = "betterTranslate"
EXTENSION_COLOR = "#4C97FF"
EXTENSION_INFO = {"name": "Better Translate"}

MESSAGES = {
    'zh-cn': {
        'BetterTranslate.extensionName': '更好的翻译',
        'BetterTranslate.translate': '使用[SERVICE]翻译[TEXT]从[FROM]到[TO]',
        'BetterTranslate.setApiKey': '设置[SERVICE]的API密钥为[KEY]',
        'BetterTranslate.detectLanguage': '检测文本[TEXT]的语言',
    },
    'en': {
        'BetterTranslate.extensionName': 'Better Translate',
        'BetterTranslate.translate': 'translate[TEXT]from[FROM]to[TO]using[SERVICE]',
        'BetterTranslate.setApiKey': 'set[SERVICE]API key to[KEY]',
        'BetterTranslate.detectLanguage': 'detect language of[TEXT]',
    },
}


def default_format_message_factory(locale: str = "en") -> FormatMessageFactory:
    """ホストを使わない場合のメッセージ整形関数を作成

    指定ロケールに無いIDは英語、それも無ければ ``default`` を返す。
    """
    def get_format_message(messages: Dict[str, Dict[str, str]]) -> MessageFormatter:
        table = messages.get(locale.lower(), {})
        fallback = messages.get("en", {})

        def format_message(message: Dict[str, str]) -> str:
            message_id = message["id"]
            return table.get(message_id) or fallback.get(message_id) or message.get("default", message_id)

        return format_message

    return get_format_message


class BetterTranslate:
    """翻訳拡張機能"""

    # opcode -> メソッド名
    BLOCK_HANDLERS = {
        "translate": "translate",
        "setApiKey": "set_api_key",
        "detectLanguage": "detect_language",
    }

    def __init__(self,
                 get_format_message: FormatMessageFactory,
                 settings: Optional[BetterTranslateSettings] = None,
                 session: Optional[requests.Session] = None,
                 api_keys: Optional[ApiKeys] = None):
        self.settings = settings or BetterTranslateSettings()
        self.session = session or requests.Session()
        self.api_keys = api_keys or ApiKeys()
        self.error_handler = ErrorHandler()

        self._format_message = get_format_message(MESSAGES)
        self.router = TranslationProviderRouter(self.session, self.settings, self.api_keys, self.error_handler)
        self.detector = LanguageDetector(self.session, self.settings)

    def format_message(self, message_id: str) -> str:
        return self._format_message({
            "id": message_id,
            "default": message_id,
            "description": message_id,
        })

    def get_info(self) -> Dict[str, Any]:
        """ブロック・メニューの記述子を取得"""
        return {
            "id": EXTENSION_ID,
            "name": self.format_message("BetterTranslate.extensionName"),
            "color1": EXTENSION_COLOR,
            "blocks": [
                {
                    "opcode": "translate",
                    "blockType": "reporter",
                    "text": self.format_message("BetterTranslate.translate"),
                    "arguments": {
                        "SERVICE": {
                            "type": "string",
                            "menu": "serviceMenu",
                            "defaultValue": ServiceType.MICROSOFT.value,
                        },
                        "TEXT": {
                            "type": "string",
                            "defaultValue": "Hello World",
                        },
                        "FROM": {
                            "type": "string",
                            "menu": "languageMenu",
                            "defaultValue": "英语",
                        },
                        "TO": {
                            "type": "string",
                            "menu": "languageMenu",
                            "defaultValue": "简体中文",
                        },
                    },
                },
                {
                    "opcode": "setApiKey",
                    "blockType": "command",
                    "text": self.format_message("BetterTranslate.setApiKey"),
                    "arguments": {
                        "SERVICE": {
                            "type": "string",
                            "menu": "serviceMenu",
                            "defaultValue": ServiceType.DEEPL.value,
                        },
                        "KEY": {
                            "type": "string",
                            "defaultValue": "",
                        },
                    },
                },
                {
                    "opcode": "detectLanguage",
                    "blockType": "reporter",
                    "text": self.format_message("BetterTranslate.detectLanguage"),
                    "arguments": {
                        "TEXT": {
                            "type": "string",
                            "defaultValue": "Hello World",
                        },
                    },
                },
            ],
            "menus": {
                "serviceMenu": {
                    "items": [service.value for service in ServiceType],
                },
                "languageMenu": {
                    "items": list(LANGUAGE_CODES.keys()),
                },
            },
        }

    def run_block(self, opcode: str, args: Dict[str, Any]) -> Any:
        """opcodeに対応するブロックを実行"""
        handler_name = self.BLOCK_HANDLERS.get(opcode)
        if handler_name is None:
            raise ValueError(f"未対応のブロック: {opcode}")
        return getattr(self, handler_name)(args)

    def translate(self, args: Dict[str, Any]) -> str:
        """翻訳ブロック（SERVICE, TEXT, FROM, TO）"""
        result = self.router.translate_text(
            args.get("SERVICE"),
            str(args.get("TEXT", "")),
            args.get("FROM"),
            args.get("TO")
        )
        return render_result(result)

    def set_api_key(self, args: Dict[str, Any]) -> bool:
        """APIキー設定ブロック（SERVICE, KEY）"""
        return self.router.set_api_key(args.get("SERVICE"), args.get("KEY", ""))

    def detect_language(self, args: Dict[str, Any]) -> str:
        """言語検出ブロック（TEXT）"""
        try:
            return self.detector.detect_language(str(args.get("TEXT", ""))).language
        except LanguageDetectionError as e:
            self.error_handler.handle_error(e, {"block": "detectLanguage"})
            return DETECTION_FAILED_MESSAGE


def create_extension(get_format_message: Optional[FormatMessageFactory] = None,
                     settings: Optional[BetterTranslateSettings] = None,
                     session: Optional[requests.Session] = None,
                     api_keys: Optional[Union[ApiKeys, Dict[str, Any]]] = None) -> BetterTranslate:
    """拡張機能を作成

    Args:
        get_format_message: ホストのメッセージ整形機能。省略時は設定のロケールで整形する
        settings: 拡張機能設定
        session: HTTPセッション（テスト時に差し替え）
        api_keys: 初期APIキー（ApiKeys または {"deepl": "..."} 形式の辞書）
    """
    settings = settings or BetterTranslateSettings()
    if get_format_message is None:
        get_format_message = default_format_message_factory(settings.locale)
    if isinstance(api_keys, dict):
        api_keys = ApiKeys.from_dict(api_keys)

    extension = BetterTranslate(get_format_message, settings=settings, session=session, api_keys=api_keys)
    configured = [service.value for service in extension.api_keys.configured_services()]
    logging.info(f"翻訳拡張機能を作成しました (locale={settings.locale}, APIキー設定済み: {configured})")
    return extension
