#!/usr/bin/env python3
"""
影像處理工具

依環境變數 (GLIDE_*) 組裝伺服器並產生單張處理後的影像

使用方法:
    GLIDE_SOURCE=./images GLIDE_CACHE=./cache python main.py cat.jpg w=300 h=200 fm=webp
"""

import argparse
import logging
import sys

from glide import GlideError, ServerFactory
from glide.common import configure_logging
from glide.settings import settings


logger = logging.getLogger(__name__)


def parse_params(items: list[str]) -> dict[str, str]:
    """
    解析 key=value 參數

    Raises:
        ValueError: 參數格式錯誤時
    """
    params: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid parameter: {item!r} (expected key=value)")
        params[key] = value
    return params


def main(argv: list[str] | None = None) -> int:
    """
    主程式

    Returns:
        退出碼 (0: 成功, 1: 失敗, 2: 參數錯誤)
    """
    parser = argparse.ArgumentParser(description="產生處理後的影像並輸出快取路徑")
    parser.add_argument("path", help="來源影像路徑（相對於 GLIDE_SOURCE）")
    parser.add_argument("params", nargs="*", help="處理參數，例如 w=300 fm=webp")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)

    try:
        params = parse_params(args.params)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        server = ServerFactory.from_settings(settings).build_server()
        cache_path = server.make_image(args.path, params)
    except GlideError as exc:
        logger.error("處理失敗: %s", exc)
        return 1

    print(cache_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
