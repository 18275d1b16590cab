"""
日誌設定

以 rich 的 RichHandler 輸出日誌至 stderr，stdout 保留給命令列輸出
重複呼叫不會重複加入 handler
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


_HANDLER_NAME = "glide-rich"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    設定根 logger

    Args:
        level: 日誌級別名稱或數值，無效名稱退回 INFO

    Returns:
        根 logger
    """
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True), rich_tracebacks=True, show_path=False
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    return root
