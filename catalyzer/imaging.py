"""Image normalization — bounded JPEG re-encode of an uploaded photo."""
import base64
import io
from dataclasses import dataclass

from PIL import Image

from catalyzer.constants import IMAGE_FORMAT, IMAGE_MEDIA_TYPE, JPEG_QUALITY, MAX_IMAGE_DIMENSION


@dataclass(frozen=True)
class UploadedImage:
    data: bytes
    filename: str
    size: int


@dataclass(frozen=True)
class NormalizedImage:
    data: bytes
    width: int
    height: int
    media_type: str = IMAGE_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def b64(self) -> str:
        return base64.standard_b64encode(self.data).decode()


def normalize_image(data: bytes) -> NormalizedImage:
    """Fit the image inside the bounding box and re-encode it as JPEG.

    Aspect ratio is preserved and smaller images are never enlarged.
    Raises PIL.UnidentifiedImageError (or OSError) when the bytes are not a
    decodable image.
    """
    with Image.open(io.BytesIO(data)) as img:
        rgb = img.convert("RGB")
    rgb.thumbnail((MAX_IMAGE_DIMENSION, MAX_IMAGE_DIMENSION), Image.Resampling.LANCZOS)
    buf = io.BytesIO()
    rgb.save(buf, format=IMAGE_FORMAT, quality=JPEG_QUALITY)
    return NormalizedImage(data=buf.getvalue(), width=rgb.width, height=rgb.height)
