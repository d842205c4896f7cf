"""
データモデル定義
翻訳サービス・言語コード表・APIキー・翻訳結果
"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from types import MappingProxyType
from typing import Optional, Dict, Any

from .exceptions import TranslationError, UnsupportedServiceError, UnsupportedLanguageError


UNSUPPORTED_SERVICE_MESSAGE = "不支持的翻译服务"


class ServiceType(Enum):
    """翻訳サービスタイプ"""
    MICROSOFT = "Microsoft"
    DEEPL = "DeepL"
    GOOGLE = "Google"
    YOUDAO = "Youdao"

    @classmethod
    def from_name(cls, name: Any) -> 'ServiceType':
        """メニュー値（完全一致）からサービスを取得"""
        for service in cls:
            if service.value == name:
                return service
        raise UnsupportedServiceError(UNSUPPORTED_SERVICE_MESSAGE)

    @classmethod
    def from_key_name(cls, name: Any) -> 'ServiceType':
        """大文字小文字を区別せずにサービスを取得（APIキー設定用）"""
        if not isinstance(name, str):
            raise UnsupportedServiceError(UNSUPPORTED_SERVICE_MESSAGE)
        normalized = name.upper()
        for service in cls:
            if service.name == normalized:
                return service
        raise UnsupportedServiceError(UNSUPPORTED_SERVICE_MESSAGE)


# メニュー表示名 -> 言語コード
LANGUAGE_CODES = MappingProxyType({
    '简体中文': 'zh',
    '英语': 'en',
    '日语': 'ja',
    '韩语': 'ko',
    '法语': 'fr',
    '德语': 'de',
    '西班牙语': 'es',
    '俄语': 'ru',
})


def resolve_language_code(name: Any) -> str:
    """言語名から言語コードを取得（未登録の名前は拒否）"""
    try:
        return LANGUAGE_CODES[name]
    except (KeyError, TypeError) as e:
        raise UnsupportedLanguageError(name, original_error=e)


@dataclass
class ApiKeys:
    """サービスごとのAPIキー"""
    microsoft: Optional[str] = None
    deepl: Optional[str] = None
    google: Optional[str] = None
    youdao: Optional[str] = None

    def get(self, service: ServiceType) -> Optional[str]:
        """サービスのAPIキーを取得"""
        return getattr(self, service.name.lower())

    def set(self, service: ServiceType, key: Optional[str]):
        """サービスのAPIキーを設定"""
        setattr(self, service.name.lower(), key)

    def configured_services(self):
        """キーが設定済みのサービス一覧"""
        return [service for service in ServiceType if self.get(service)]

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApiKeys':
        """辞書から作成（未知のキーは無視）"""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    def __repr__(self) -> str:
        # キーの値はログに出さない
        masked = ", ".join(
            f"{f.name}={'***' if getattr(self, f.name) else None}" for f in fields(self)
        )
        return f"ApiKeys({masked})"


@dataclass
class TranslationResult:
    """翻訳結果"""
    text: str
    service: Optional[ServiceType]
    source_language: Optional[str]
    target_language: Optional[str]
    success: bool
    error: Optional[TranslationError] = None

    @classmethod
    def failed(cls, error: TranslationError, service: Optional[ServiceType] = None,
               source_language: Optional[str] = None,
               target_language: Optional[str] = None) -> 'TranslationResult':
        """失敗結果を作成"""
        return cls(
            text="",
            service=service,
            source_language=source_language,
            target_language=target_language,
            success=False,
            error=error
        )
