#!/usr/bin/env python3
"""
FastAPIサーバーを起動するエントリポイント
"""
import os
import sys
from pathlib import Path

# プロジェクトルートをPYTHONPATHに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from infrastructure.logging.log_setup import setup_console_logging

if __name__ == "__main__":
    setup_console_logging(level=os.environ.get("LOG_LEVEL", "INFO"))
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", "8000")),
        reload=os.environ.get("RELOAD", "") == "1",  # 開発時の自動リロード
    )
