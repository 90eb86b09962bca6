"""
Image values passed between the uploader, the Gemini client and the page.

Both the source and the enhanced image are immutable and carry their MIME type,
so either can be rendered as a `data:` URL or exported as a file.
"""
import base64
import io
import logging
import mimetypes
import time
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError

from image_enhancer.errors import LocalIOError

logger = logging.getLogger(__name__)

SUPPORTED_UPLOAD_TYPES = ["png", "jpg", "jpeg", "webp"]

EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}


@dataclass(frozen=True)
class EncodedImage:
    data: bytes
    mime_type: str

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


class SourceImage(EncodedImage):
    """The user's uploaded photo."""


class EnhancedImage(EncodedImage):
    """The image returned by the model."""


def load_source_image(data: bytes, mime_type: Optional[str] = None) -> SourceImage:
    """Validate uploaded bytes with Pillow and wrap them in a SourceImage.

    The MIME type reported by the browser wins; when it is missing or not an image
    type we fall back to the format Pillow detected.
    Raises LocalIOError for empty or undecodable files.
    """
    if not data:
        raise LocalIOError()
    try:
        with Image.open(io.BytesIO(data)) as img:
            detected = Image.MIME.get(img.format or "")
            img.verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
        logger.warning("Rejected upload: %s", exc)
        raise LocalIOError() from exc

    if not mime_type or not mime_type.startswith("image/"):
        mime_type = detected
    if not mime_type:
        raise LocalIOError()
    return SourceImage(data=bytes(data), mime_type=mime_type)


def extension_for(mime_type: str) -> str:
    if mime_type in EXTENSIONS:
        return EXTENSIONS[mime_type]
    guessed = mimetypes.guess_extension(mime_type or "")
    return guessed.lstrip(".") if guessed else "png"


def export_filename(image: EncodedImage, timestamp: Optional[int] = None) -> str:
    """enhanced-image-<unix seconds>.<ext>"""
    if timestamp is None:
        timestamp = int(time.time())
    return f"enhanced-image-{timestamp}.{extension_for(image.mime_type)}"
