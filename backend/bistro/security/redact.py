"""Mask guest contact details before they reach the logs."""

from __future__ import annotations


def mask_email(value: str | None) -> str | None:
    """``hanako@example.com`` becomes ``h***@example.com``."""
    if not value or "@" not in value:
        return value
    local, _, domain = value.partition("@")
    return f"{local[:1]}***@{domain}"


def mask_phone(value: str | None) -> str | None:
    """Keep only the last four digits."""
    if not value:
        return value
    digits = "".join(ch for ch in value if ch.isdigit())
    return f"***{digits[-4:]}" if len(digits) >= 4 else "***"


__all__ = ["mask_email", "mask_phone"]
