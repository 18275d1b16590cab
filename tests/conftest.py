"""
Pytest 配置和共用 fixtures
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import ExifTags, Image, ImageDraw

from glide.drivers.gd import PillowDriver
from glide.drivers.image import ManagedImage
from glide.filesystem import MemoryFilesystem


def encode_image(image: Image.Image, fmt: str, **kwargs: object) -> bytes:
    """將 Pillow 影像編碼為位元組"""
    buffer = io.BytesIO()
    image.save(buffer, fmt, **kwargs)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def landscape_jpeg() -> bytes:
    """
    生成 400x200 的橫式 JPEG

    左半藍色、右半橘色，中間有白色圓形
    """
    img = Image.new("RGB", (400, 200), color=(30, 60, 200))
    draw = ImageDraw.Draw(img)
    draw.rectangle([(200, 0), (399, 199)], fill=(240, 140, 20))
    draw.ellipse([(170, 70), (230, 130)], fill=(255, 255, 255))
    return encode_image(img, "JPEG", quality=95)


@pytest.fixture(scope="session")
def transparent_png() -> bytes:
    """生成 120x80 的透明背景 PNG，中間為不透明紅色矩形"""
    img = Image.new("RGBA", (120, 80), color=(0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle([(30, 20), (89, 59)], fill=(255, 0, 0, 255))
    return encode_image(img, "PNG")


@pytest.fixture(scope="session")
def rotated_jpeg() -> bytes:
    """
    生成帶 EXIF 方向標記 (6 = 需順時針旋轉 90 度) 的 300x100 JPEG

    轉正後應為 100x300
    """
    img = Image.new("RGB", (300, 100), color=(10, 120, 10))
    exif = Image.Exif()
    exif[ExifTags.Base.Orientation] = 6
    return encode_image(img, "JPEG", exif=exif.tobytes())


@pytest.fixture
def source_dir(tmp_path: Path, landscape_jpeg: bytes, transparent_png: bytes) -> Path:
    """建立含測試影像的來源目錄"""
    source = tmp_path / "source"
    (source / "photos").mkdir(parents=True)
    (source / "photos" / "landscape.jpg").write_bytes(landscape_jpeg)
    (source / "logo.png").write_bytes(transparent_png)
    return source


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """快取目錄（不預先建立）"""
    return tmp_path / "cache"


@pytest.fixture
def memory_source(landscape_jpeg: bytes, transparent_png: bytes) -> MemoryFilesystem:
    """含測試影像的記憶體來源儲存"""
    return MemoryFilesystem(
        {"photos/landscape.jpg": landscape_jpeg, "logo.png": transparent_png}
    )


@pytest.fixture
def make_managed() -> Callable[..., ManagedImage]:
    """將 Pillow 影像包裝為 ManagedImage（使用 gd 驅動）"""

    def _make(core: Image.Image, source_format: str | None = "png") -> ManagedImage:
        return ManagedImage(core=core, driver=PillowDriver(), source_format=source_format)

    return _make


@pytest.fixture
def two_tone_image() -> Image.Image:
    """左半深灰、右半淺灰的 100x100 影像"""
    img = Image.new("RGB", (100, 100), color=(80, 80, 80))
    ImageDraw.Draw(img).rectangle([(50, 0), (99, 99)], fill=(160, 160, 160))
    return img
