"""
Derived image URLs.

Resized variants are never stored. They are a pure function of the
image's file id, its extension and the configured static-asset host.
"""

from database.schemas.content import Resized

RESIZED_WIDTHS = (480, 800, 1200, 1600, 2400)
DEFAULT_EXTENSION = "jpg"
WEBP_EXTENSION = "webp"


def build_resized_urls(statics_host: str, file_id: str, extension: str = "") -> Resized:
    """
    Build the original and width-suffixed URLs for one image file.

    Args:
        statics_host: Base URL, e.g. https://statics.example.com/images
        file_id: Stored file identifier (empty means no file)
        extension: File extension without the dot (defaults to jpg)

    Returns:
        Resized: all fields empty when file_id is empty
    """
    if not file_id:
        return Resized()
    ext = extension or DEFAULT_EXTENSION
    host = statics_host.rstrip("/")

    urls = {"original": f"{host}/{file_id}.{ext}"}
    for width in RESIZED_WIDTHS:
        urls[f"w{width}"] = f"{host}/{file_id}-w{width}.{ext}"
    return Resized(**urls)


def build_webp_urls(statics_host: str, file_id: str) -> Resized:
    """Same variants as build_resized_urls, always in webp."""
    return build_resized_urls(statics_host, file_id, WEBP_EXTENSION)
