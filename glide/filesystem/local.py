"""
本機檔案系統儲存

將具名資料存放於根目錄之下，拒絕任何跳出根目錄的路徑
寫入為原子操作（暫存檔 + os.replace）
"""

import logging
import os
import tempfile
from pathlib import Path

from glide.core.exceptions import FilesystemError


logger = logging.getLogger(__name__)


class LocalFilesystem:
    """
    本機檔案系統

    建構時不會存取磁碟；根目錄於第一次寫入時才建立
    """

    def __init__(self, root: str | os.PathLike[str]):
        """
        初始化本機檔案系統

        Args:
            root: 根目錄路徑
        """
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """根目錄"""
        return self._root

    def _resolve(self, path: str) -> Path:
        """將相對路徑轉為根目錄下的絕對路徑"""
        relative = path.lstrip("/")
        if not relative:
            raise FilesystemError("Empty path")

        root = self._root.resolve()
        target = (root / relative).resolve()
        if not target.is_relative_to(root):
            raise FilesystemError(f"Path escapes root: {path!r}")
        return target

    def read(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def write(self, path: str, contents: bytes) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)

        # 先寫入同目錄暫存檔再替換，讀取端不會看到寫到一半的檔案
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as tmp:
                tmp.write(contents)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d bytes to %s", len(contents), target)

    def exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def __repr__(self) -> str:
        return f"LocalFilesystem(root={str(self._root)!r})"
