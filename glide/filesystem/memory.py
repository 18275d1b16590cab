"""
記憶體儲存

以字典保存資料，適合測試或短生命週期的快取
"""

import threading


class MemoryFilesystem:
    """執行緒安全的記憶體檔案系統"""

    def __init__(self, files: dict[str, bytes] | None = None):
        self._files: dict[str, bytes] = {}
        self._lock = threading.Lock()
        for path, contents in (files or {}).items():
            self.write(path, contents)

    @staticmethod
    def _key(path: str) -> str:
        return path.lstrip("/")

    def read(self, path: str) -> bytes:
        with self._lock:
            try:
                return self._files[self._key(path)]
            except KeyError:
                raise FileNotFoundError(path) from None

    def write(self, path: str, contents: bytes) -> None:
        with self._lock:
            self._files[self._key(path)] = bytes(contents)

    def exists(self, path: str) -> bool:
        with self._lock:
            return self._key(path) in self._files

    def __len__(self) -> int:
        with self._lock:
            return len(self._files)
