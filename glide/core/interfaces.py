"""
介面定義

以 Protocol 描述協作元件的能力，工廠只依賴這些抽象而非具體實作
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable


if TYPE_CHECKING:
    from PIL import Image

    from glide.data_model import ManipulationStage
    from glide.drivers.image import ManagedImage


Params = Mapping[str, object]


@runtime_checkable
class FilesystemProtocol(Protocol):
    """
    具名位元組資料的儲存介面

    實作可以是本機磁碟、記憶體或遠端物件儲存
    """

    def read(self, path: str) -> bytes:
        """讀取資料，不存在時拋出 FileNotFoundError"""
        ...

    def write(self, path: str, contents: bytes) -> None:
        """寫入資料（覆寫既有內容）"""
        ...

    def exists(self, path: str) -> bool:
        """檢查資料是否存在"""
        ...


@runtime_checkable
class DriverProtocol(Protocol):
    """影像編解碼驅動介面"""

    name: str
    output_formats: tuple[str, ...]

    def decode(self, data: bytes) -> Image.Image:
        """將原始位元組解碼為 Pillow 影像"""
        ...

    def encode(self, image: Image.Image, fmt: str, quality: int) -> bytes:
        """將 Pillow 影像編碼為指定格式"""
        ...


@runtime_checkable
class ManipulatorProtocol(Protocol):
    """影像處理階段介面"""

    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        """依參數處理影像並回傳結果"""
        ...


class BaseManipulator(ABC):
    """
    影像處理階段基底類別

    子類別必須宣告 stage 並實作 run()；
    參數缺少或無效時應直接回傳原影像，不得拋出例外
    """

    stage: ClassVar[ManipulationStage]

    @abstractmethod
    def run(self, image: ManagedImage, params: Params) -> ManagedImage:
        """
        執行處理

        Args:
            image: 目前的影像狀態
            params: 請求參數

        Returns:
            處理後的影像狀態
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
