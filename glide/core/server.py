"""
影像伺服器

組裝完成後的執行期物件：驗證簽章、檢查快取、處理來源影像並寫入快取
"""

import hashlib
import logging
from collections.abc import Mapping

from glide.security.sign_key import SignKey, build_query

from .api import Api
from .exceptions import ImageNotFoundError
from .interfaces import FilesystemProtocol


logger = logging.getLogger(__name__)


class Server:
    """
    影像伺服器

    建構後不可變更；所有協作元件僅透過唯讀屬性提供
    """

    __slots__ = ("_api", "_cache", "_sign_key", "_source")

    def __init__(
        self,
        source: FilesystemProtocol,
        cache: FilesystemProtocol,
        api: Api,
        sign_key: SignKey | None = None,
    ):
        """
        初始化伺服器

        Args:
            source: 來源儲存
            cache: 快取儲存
            api: 影像處理 API
            sign_key: 簽章金鑰，None 表示停用簽章驗證
        """
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_cache", cache)
        object.__setattr__(self, "_api", api)
        object.__setattr__(self, "_sign_key", sign_key)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def source(self) -> FilesystemProtocol:
        return self._source

    @property
    def cache(self) -> FilesystemProtocol:
        return self._cache

    @property
    def api(self) -> Api:
        return self._api

    @property
    def sign_key(self) -> SignKey | None:
        return self._sign_key

    def get_source_path(self, path: str) -> str:
        """
        取得來源路徑

        Raises:
            ImageNotFoundError: 路徑為空時
        """
        source_path = path.lstrip("/")
        if not source_path:
            raise ImageNotFoundError(path)
        return source_path

    def get_cache_path(self, path: str, params: Mapping[str, object]) -> str:
        """
        取得快取路徑

        以來源路徑與排序後的參數計算 md5；簽章參數不影響快取路徑
        """
        key = f"{self.get_source_path(path)}?{build_query(params)}"
        return hashlib.md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()

    def source_file_exists(self, path: str) -> bool:
        return self._source.exists(self.get_source_path(path))

    def cache_file_exists(self, path: str, params: Mapping[str, object]) -> bool:
        return self._cache.exists(self.get_cache_path(path, params))

    def make_image(self, path: str, params: Mapping[str, object]) -> str:
        """
        產生處理後的影像

        Args:
            path: 來源影像路徑
            params: 請求參數

        Returns:
            快取路徑

        Raises:
            SignatureError: 已設定金鑰且簽章無效時
            ImageNotFoundError: 來源影像不存在時
        """
        if self._sign_key is not None:
            self._sign_key.validate_request(path, params)

        cache_path = self.get_cache_path(path, params)
        if self._cache.exists(cache_path):
            logger.debug("Cache hit: %s -> %s", path, cache_path)
            return cache_path

        source_path = self.get_source_path(path)
        if not self._source.exists(source_path):
            raise ImageNotFoundError(path)

        source = self._source.read(source_path)
        self._cache.write(cache_path, self._api.run(source, params))
        logger.info("Generated %s -> %s", source_path, cache_path)
        return cache_path

    def get_image(self, path: str, params: Mapping[str, object]) -> bytes:
        """產生影像並回傳快取內容"""
        return self._cache.read(self.make_image(path, params))

    def __repr__(self) -> str:
        return (
            f"Server(source={self._source!r}, cache={self._cache!r}, "
            f"api={self._api!r}, sign_key={self._sign_key!r})"
        )
