"""
config.py - パス解決・アプリ定数
FilterDesk v0.1
"""

import os
import sys

# ---------------------------------------------------------------------------
# パス解決（exe 化対応）
# ---------------------------------------------------------------------------


def get_base_path() -> str:
    """
    実行環境に応じてアプリのベースディレクトリを返す。
    - exe 化後  : exe ファイルの存在するディレクトリ
    - スクリプト: プロジェクトルート
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # config.py is in filterdesk/, so project root is one level up
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


BASE_PATH = get_base_path()

# 保存フィルタ用の key/value ストア（SQLite）
DB_PATH = os.environ.get("FILTERDESK_DB_PATH") or os.path.join(
    BASE_PATH, "filters.db"
)

# 結果表示用の Issue 一覧（JSON）
ISSUES_PATH = os.environ.get("FILTERDESK_ISSUES_PATH") or os.path.join(
    BASE_PATH, "issues.json"
)

# ---------------------------------------------------------------------------
# ストレージキー
# ---------------------------------------------------------------------------

SAVED_FILTERS_KEY = "saved-filters"
ACTIVE_FILTER_KEY = "active-filter-id"

# ---------------------------------------------------------------------------
# アプリ定数
# ---------------------------------------------------------------------------

APP_TITLE = "Filter Manager"
APP_VERSION = "0.1.0"
RESULTS_PAGE_SIZE = 100  # 結果パネルに表示する最大件数

# ---------------------------------------------------------------------------
# カラーパレット（GitHub ライク）
# ---------------------------------------------------------------------------

COLOR_ACTIVE = "#2da44e"  # 緑（適用中フィルタ）
COLOR_BG = "#F0F2F5"  # 背景
COLOR_CARD = "#FFFFFF"  # カード背景
COLOR_BORDER = "#D0D7DE"  # ボーダー
COLOR_TEXT_MUTED = "#656D76"  # 薄いテキスト
COLOR_TEXT_MAIN = "#1F2328"  # メインテキスト
COLOR_PRIMARY = "#0969DA"  # プライマリ（青）
COLOR_DANGER = "#CF222E"  # 危険色（赤）
COLOR_CODE_BG = "#F6F8FA"  # クエリ表示の背景

# UI 定数
BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6
