"""
日誌設定測試
"""

import logging

import pytest
from rich.logging import RichHandler

from glide.common import configure_logging


def _rich_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    """RichHandler 設定測試"""

    @pytest.mark.unit
    def test_idempotent(self) -> None:
        root = configure_logging("INFO")
        configure_logging("INFO")

        assert len(_rich_handlers(root)) == 1

    @pytest.mark.unit
    def test_level_names(self) -> None:
        assert configure_logging("debug").level == logging.DEBUG
        assert configure_logging("nonsense").level == logging.INFO

    @pytest.mark.unit
    def test_logs_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        root = configure_logging("INFO")
        handler = _rich_handlers(root)[0]
        assert isinstance(handler, RichHandler)
        assert handler.console.stderr is True

        logging.getLogger("glide.test").info("Generated cat.jpg")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Generated cat.jpg" in captured.err
