"""Record to QR payload encoding."""

from .payload import encode_payload, value_text

__all__ = ["encode_payload", "value_text"]
