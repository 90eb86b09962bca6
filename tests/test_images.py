"""
Tests for source image intake and export naming.
"""
import io

import pytest
from PIL import Image

from image_enhancer.errors import LocalIOError
from image_enhancer.images import EnhancedImage, export_filename, load_source_image

from conftest import make_image_bytes


class TestLoadSourceImage:

    def test_png_keeps_reported_mime(self, png_bytes):
        source = load_source_image(png_bytes, "image/png")
        assert source.mime_type == "image/png"
        assert source.data == png_bytes
        assert source.data_url.startswith("data:image/png;base64,")

    def test_mime_detected_when_missing(self):
        source = load_source_image(make_image_bytes("JPEG"), None)
        assert source.mime_type == "image/jpeg"

    def test_non_image_mime_replaced(self, png_bytes):
        assert load_source_image(png_bytes, "application/octet-stream").mime_type == "image/png"

    def test_garbage_rejected(self):
        with pytest.raises(LocalIOError) as exc_info:
            load_source_image(b"definitely not an image", "image/png")
        assert exc_info.value.message == "Error reading the file."

    def test_empty_rejected(self):
        with pytest.raises(LocalIOError):
            load_source_image(b"", "image/png")

    def test_immutable(self, png_bytes):
        source = load_source_image(png_bytes, "image/png")
        with pytest.raises(AttributeError):
            source.mime_type = "image/gif"


class TestExportFilename:

    @pytest.mark.parametrize("mime,ext", [
        ("image/png", "png"),
        ("image/jpeg", "jpg"),
        ("image/webp", "webp"),
        ("application/x-unknown-thing", "png"),
    ])
    def test_extension_from_mime(self, mime, ext):
        image = EnhancedImage(data=b"x", mime_type=mime)
        assert export_filename(image, timestamp=1700000000) == f"enhanced-image-1700000000.{ext}"

    def test_uses_current_time(self):
        name = export_filename(EnhancedImage(data=b"x", mime_type="image/png"))
        stamp = name[len("enhanced-image-"):-len(".png")]
        assert stamp.isdigit()


class TestOversizedUpload:

    def test_decompression_bomb_is_local_error(self):
        buf = io.BytesIO()
        Image.new("1", (20000, 10000)).save(buf, format="PNG")
        with pytest.raises(LocalIOError):
            load_source_image(buf.getvalue(), "image/png")
