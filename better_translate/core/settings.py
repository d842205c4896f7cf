"""
拡張機能の設定
"""

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)


@dataclass
class BetterTranslateSettings:
    """拡張機能設定"""

    locale: str = "zh-cn"
    request_timeout: Optional[float] = None  # None=タイムアウトなし
    use_pro_api: bool = False  # DeepL: False=Free API, True=Pro API

    # エンドポイント
    microsoft_url: str = "https://api.microsofttranslator.com/v2/ajax.svc/Translate"
    deepl_free_url: str = "https://api-free.deepl.com/v2/translate"
    deepl_pro_url: str = "https://api.deepl.com/v2/translate"
    google_url: str = "https://translate.googleapis.com/translate_a/single"
    youdao_url: str = "https://fanyi.youdao.com/translate"
    detect_url: str = "https://fanyi.youdao.com/translate"

    @property
    def deepl_url(self) -> str:
        """使用するDeepLエンドポイント"""
        return self.deepl_pro_url if self.use_pro_api else self.deepl_free_url

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BetterTranslateSettings":
        """辞書から作成"""
        names = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - names)
        if unknown:
            logger.warning(f"未知の設定項目を無視します: {unknown}")
        return cls(**{k: v for k, v in data.items() if k in names})
