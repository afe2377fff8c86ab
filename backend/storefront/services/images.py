"""
Turns an uploaded image into a data URL usable directly as an <img src>.
"""
import base64
import mimetypes
from typing import Optional

from storefront.errors import ImageReadError


def guess_mime_type(filename: Optional[str], content_type: Optional[str] = None) -> str:
    if content_type and content_type != "application/octet-stream":
        return content_type
    guessed, _ = mimetypes.guess_type(filename or "")
    return guessed or "application/octet-stream"


def to_data_url(content: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


async def encode_image(upload) -> str:
    """
    Read an uploaded file and return it as a base64 data URL.

    `upload` is anything shaped like FastAPI's UploadFile: an async `read()`
    plus optional `filename` / `content_type` attributes.
    """
    try:
        content = await upload.read()
    except (OSError, ValueError) as e:
        raise ImageReadError(f"Could not read {getattr(upload, 'filename', None)!r}: {e}") from e

    mime_type = guess_mime_type(
        getattr(upload, "filename", None),
        getattr(upload, "content_type", None),
    )
    return to_data_url(content, mime_type)
