"""Site-wide display strings for the blog, from environment variables."""

from .services.global_data import (
    GlobalData,
    MalformedURIError,
    SiteVariant,
    decode_uri,
    get_global_data,
)

__all__ = [
    "GlobalData",
    "MalformedURIError",
    "SiteVariant",
    "decode_uri",
    "get_global_data",
]
