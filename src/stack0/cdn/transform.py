"""
Client-side image transform URLs.

The CDN edge rewrites ``?w=...&f=...`` style queries into resized variants,
so building a transform URL needs no API call. Widths are snapped to the
sizes the edge caches.
"""

from typing import Dict, Optional
from urllib.parse import urlsplit

from ..core.query import build_query
from ..exceptions import ConfigurationError
from .models import TransformOptions

ALLOWED_WIDTHS = (256, 384, 640, 750, 828, 1080, 1200, 1920, 2048, 3840)


def nearest_width(width: int) -> int:
    """Snap ``width`` to the closest allowed width, preferring the smaller on ties."""
    nearest = ALLOWED_WIDTHS[0]
    for allowed in ALLOWED_WIDTHS:
        if abs(allowed - width) < abs(nearest - width):
            nearest = allowed
    return nearest


def build_transform_params(options: Optional[TransformOptions]) -> Dict[str, object]:
    """Map transform options onto the edge's short query keys."""
    if options is None:
        return {}

    params: Dict[str, object] = {
        "f": options.format,
        "q": options.quality,
        "w": nearest_width(options.width) if options.width is not None else None,
        "h": options.height,
        "fit": options.fit,
        "crop": options.crop,
        "crop-x": options.crop_x,
        "crop-y": options.crop_y,
        "crop-w": options.crop_width,
        "crop-h": options.crop_height,
        "blur": options.blur,
        "sharpen": options.sharpen,
        "brightness": options.brightness,
        "saturation": options.saturation,
        "rotate": options.rotate,
    }
    if options.grayscale:
        params["grayscale"] = "true"
    if options.flip:
        params["flip"] = "y"
    if options.flop:
        params["flop"] = "x"
    return params


def build_transform_query(options: Optional[TransformOptions]) -> str:
    """Encoded query for ``options``; empty when nothing is set."""
    return build_query(build_transform_params(options))


def resolve_asset_url(asset: str, cdn_url: Optional[str] = None) -> str:
    """Base URL for a full asset URL or a storage key.

    A full URL keeps only its scheme, host and path. A storage key is joined
    to ``cdn_url``.

    Raises:
        ConfigurationError: ``asset`` is a storage key and no CDN URL is set.
    """
    if asset.startswith(("http://", "https://")):
        parts = urlsplit(asset)
        host = parts.netloc.rpartition("@")[2]
        return f"{parts.scheme}://{host}{parts.path}"

    if not cdn_url:
        raise ConfigurationError(
            "Transform URLs need a full asset URL or a configured CDN URL",
            {"asset": asset},
        )
    return f"{cdn_url.rstrip('/')}/{asset}"


def build_transform_url(
    asset: str,
    options: Optional[TransformOptions] = None,
    cdn_url: Optional[str] = None,
) -> str:
    """Transform URL for ``asset``, or its plain URL when no option is set.

    Example:
        >>> build_transform_url("https://cdn.example.com/a.jpg", TransformOptions(width=1100))
        'https://cdn.example.com/a.jpg?w=1080'
    """
    base = resolve_asset_url(asset, cdn_url)
    query = build_transform_query(options)
    return f"{base}?{query}" if query else base
