"""
テスト設定ファイル
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def make_response():
    """HTTPレスポンスのモックを作成する関数"""

    def _make(json_data=None, text="", status_code=200, invalid_json=False):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        if invalid_json:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = json_data
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(
                f"{status_code} Client Error", response=response
            )
        return response

    return _make


@pytest.fixture
def session():
    """requests.Sessionのモック"""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def settings():
    """デフォルト設定"""
    from better_translate.core.settings import BetterTranslateSettings

    return BetterTranslateSettings()


@pytest.fixture
def api_keys():
    """空のAPIキー"""
    from better_translate.core.models import ApiKeys

    return ApiKeys()


@pytest.fixture
def extension(session):
    """モックセッションを使う拡張機能（中国語ロケール）"""
    from better_translate import create_extension

    return create_extension(session=session)
