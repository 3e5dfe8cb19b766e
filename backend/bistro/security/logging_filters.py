"""Log filter that scrubs credentials and guest contact details."""

from __future__ import annotations

import logging
import re

_REDACTED = "**REDACTED**"

_PATTERNS = (
    re.compile(r"Authorization: Bearer\s+[\w\.-]+", re.IGNORECASE),
    re.compile(r"\"(?:access_token|password)\"\s*:\s*\"[^\"]+\"", re.IGNORECASE),
    re.compile(r"\"customer_(?:email|phone)\"\s*:\s*\"[^\"]+\"", re.IGNORECASE),
)


def scrub(message: str) -> str:
    for pattern in _PATTERNS:
        message = pattern.sub(_REDACTED, message)
    return message


class SensitiveFilter(logging.Filter):
    """Rewrite string log messages with sensitive values replaced."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub(record.msg)
        return True


__all__ = ["SensitiveFilter", "scrub"]
