"""QR rasterization."""

from .codec import QrConfig, qr_bytes, rasterize

__all__ = ["QrConfig", "qr_bytes", "rasterize"]
