"""
管線中的影像狀態

ManagedImage 在各處理階段之間傳遞，核心影像一律為 RGB 或 RGBA 模式的 Pillow 影像
"""

from dataclasses import dataclass

from PIL import Image

from glide.core.interfaces import DriverProtocol


# 格式名稱 -> (Pillow 格式, MIME)
FORMATS: dict[str, tuple[str, str]] = {
    "jpg": ("JPEG", "image/jpeg"),
    "png": ("PNG", "image/png"),
    "gif": ("GIF", "image/gif"),
    "webp": ("WEBP", "image/webp"),
}

DEFAULT_FORMAT: str = "jpg"
DEFAULT_QUALITY: int = 90


def sniff_format(data: bytes) -> str | None:
    """
    由檔頭判斷影像格式

    Args:
        data: 原始位元組

    Returns:
        格式名稱 (jpg/png/gif/webp)，無法判斷時為 None
    """
    if data.startswith(b"\xff\xd8\xff"):
        return "jpg"
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    return None


def normalize_mode(image: Image.Image) -> Image.Image:
    """將影像轉為 RGB 或 RGBA，保留透明度"""
    if image.mode in ("RGB", "RGBA"):
        return image
    if "A" in image.getbands() or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


@dataclass
class ManagedImage:
    """
    影像狀態

    Attributes:
        core: Pillow 影像
        driver: 負責編碼的驅動
        source_format: 來源格式（由檔頭判斷）
        output_format: 輸出格式（編碼後設定）
        encoded: 編碼後的位元組（尚未編碼時為 None）
    """

    core: Image.Image
    driver: DriverProtocol
    source_format: str | None = None
    output_format: str | None = None
    encoded: bytes | None = None

    @property
    def width(self) -> int:
        return self.core.width

    @property
    def height(self) -> int:
        return self.core.height

    @property
    def mime(self) -> str | None:
        """輸出 MIME 類型，尚未編碼時回傳來源格式的 MIME"""
        fmt = self.output_format or self.source_format
        return FORMATS[fmt][1] if fmt in FORMATS else None

    def replace(self, core: Image.Image) -> "ManagedImage":
        """
        替換核心影像

        已編碼的結果會失效
        """
        self.core = normalize_mode(core)
        self.encoded = None
        self.output_format = None
        return self

    def encode(self, fmt: str, quality: int = DEFAULT_QUALITY) -> "ManagedImage":
        """
        使用驅動編碼影像

        Args:
            fmt: 輸出格式
            quality: 品質 (0-100)

        Returns:
            自身（已設定 encoded 與 output_format）
        """
        self.encoded = self.driver.encode(self.core, fmt, quality)
        self.output_format = fmt
        return self
