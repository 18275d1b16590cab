"""
影像驅動測試
"""

import io

import numpy as np
import pytest
from PIL import Image

from glide.core.exceptions import ConfigurationError, DriverNotSupportedError, ImageDecodeError
from glide.drivers import DriverRegistry, ImageManager, ManagedImage, sniff_format
from glide.drivers.gd import PillowDriver
from glide.drivers.image import normalize_mode
from glide.drivers.opencv import OpenCVDriver


class TestDriverRegistry:
    """測試驅動註冊表"""

    @pytest.mark.unit
    def test_builtin_drivers(self) -> None:
        names = [info.name for info in DriverRegistry.list_drivers()]

        assert "gd" in names
        assert "opencv" in names
        assert DriverRegistry.has_driver("gd")
        assert not DriverRegistry.has_driver(None)

    @pytest.mark.unit
    def test_create(self) -> None:
        assert isinstance(DriverRegistry.create("gd"), PillowDriver)
        assert isinstance(DriverRegistry.create("opencv"), OpenCVDriver)

    @pytest.mark.unit
    def test_create_unknown(self) -> None:
        with pytest.raises(DriverNotSupportedError, match="imagick"):
            DriverRegistry.create("imagick")

    @pytest.mark.unit
    def test_duplicate_registration(self) -> None:
        @DriverRegistry.register("test-dummy")
        class DummyDriver:
            pass

        try:
            with pytest.raises(ValueError, match="already registered"):
                DriverRegistry.register("test-dummy")(type("Other", (), {}))
            # 重複註冊同一類別不視為錯誤
            assert DriverRegistry.register("test-dummy")(DummyDriver) is DummyDriver
        finally:
            DriverRegistry._drivers.pop("test-dummy", None)


class TestImageManager:
    """測試影像管理器"""

    @pytest.mark.unit
    def test_default_driver(self) -> None:
        manager = ImageManager()

        assert manager.driver_name == "gd"
        assert isinstance(manager.driver, PillowDriver)

    @pytest.mark.unit
    def test_unknown_driver_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            ImageManager("imagick")

    @pytest.mark.integration
    @pytest.mark.parametrize("driver", ["gd", "opencv"])
    def test_make(self, driver: str, landscape_jpeg: bytes) -> None:
        image = ImageManager(driver).make(landscape_jpeg)

        assert isinstance(image, ManagedImage)
        assert image.core.size == (400, 200)
        assert image.core.mode == "RGB"
        assert image.source_format == "jpg"
        assert image.encoded is None

    @pytest.mark.integration
    @pytest.mark.parametrize("driver", ["gd", "opencv"])
    def test_make_invalid_data(self, driver: str) -> None:
        with pytest.raises(ImageDecodeError):
            ImageManager(driver).make(b"definitely not an image")


class TestDrivers:
    """測試編解碼"""

    @pytest.mark.integration
    @pytest.mark.parametrize("driver_cls", [PillowDriver, OpenCVDriver])
    def test_png_alpha_and_channel_order(self, driver_cls: type, transparent_png: bytes) -> None:
        """透明度與色彩通道順序保持正確"""
        driver = driver_cls()
        decoded = driver.decode(transparent_png)

        assert decoded.mode == "RGBA"
        assert decoded.getpixel((60, 40)) == (255, 0, 0, 255)
        assert decoded.getpixel((0, 0))[3] == 0

        encoded = driver.encode(decoded, "png", 90)
        roundtrip = Image.open(io.BytesIO(encoded))
        assert roundtrip.convert("RGBA").getpixel((60, 40)) == (255, 0, 0, 255)

    @pytest.mark.integration
    @pytest.mark.parametrize("driver_cls", [PillowDriver, OpenCVDriver])
    def test_jpeg_drops_alpha(self, driver_cls: type, transparent_png: bytes) -> None:
        driver = driver_cls()
        encoded = driver.encode(driver.decode(transparent_png), "jpg", 80)

        assert sniff_format(encoded) == "jpg"
        assert Image.open(io.BytesIO(encoded)).mode == "RGB"

    @pytest.mark.integration
    def test_quality_affects_jpeg_size(self, landscape_jpeg: bytes) -> None:
        driver = PillowDriver()
        image = driver.decode(landscape_jpeg)
        noisy = Image.fromarray(
            np.random.default_rng(0).integers(0, 255, (200, 200, 3), dtype=np.uint8)
        )

        assert len(driver.encode(noisy, "jpg", 10)) < len(driver.encode(noisy, "jpg", 95))
        assert sniff_format(driver.encode(image, "webp", 50)) == "webp"
        assert sniff_format(driver.encode(image, "gif", 90)) == "gif"

    @pytest.mark.unit
    def test_output_formats(self) -> None:
        assert "gif" in PillowDriver.output_formats
        assert "gif" not in OpenCVDriver.output_formats


class TestImageHelpers:
    """測試影像工具函數"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\xff\xd8\xff\xe0rest", "jpg"),
            (b"\x89PNG\r\n\x1a\nrest", "png"),
            (b"GIF89a...", "gif"),
            (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "webp"),
            (b"BM....", None),
            (b"", None),
        ],
    )
    def test_sniff_format(self, data: bytes, expected: str | None) -> None:
        assert sniff_format(data) == expected

    @pytest.mark.unit
    def test_normalize_mode(self) -> None:
        assert normalize_mode(Image.new("L", (2, 2))).mode == "RGB"
        assert normalize_mode(Image.new("LA", (2, 2))).mode == "RGBA"
        assert normalize_mode(Image.new("CMYK", (2, 2))).mode == "RGB"

        palette = Image.new("P", (2, 2))
        palette.info["transparency"] = 0
        assert normalize_mode(palette).mode == "RGBA"

    @pytest.mark.unit
    def test_replace_resets_encoding(self) -> None:
        image = ManagedImage(
            core=Image.new("RGB", (4, 4)), driver=PillowDriver(), source_format="png"
        )
        image.encode("png")

        assert image.encoded is not None
        assert image.mime == "image/png"

        image.replace(Image.new("L", (2, 2)))

        assert image.encoded is None
        assert image.output_format is None
        assert image.core.mode == "RGB"
