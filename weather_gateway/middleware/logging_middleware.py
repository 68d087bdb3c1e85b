"""Logging helpers with sensitive data redaction."""

import logging
import re

# Query parameters whose values must never reach the logs
SENSITIVE_PARAMS = [
    "appid",
    "api_key",
    "key",
    "token",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"([?&]){param}=([^&\s\"]+)"
        redacted = re.sub(pattern, rf"\g<1>{param}=***REDACTED***", redacted)
    return redacted


class RedactingFilter(logging.Filter):
    """Scrub credentials from every record before a handler formats it.

    Covers the message (with its args merged in) and string fields passed
    through ``extra``, such as the URLs logged by the httpx event hooks.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        record.msg = redact_sensitive_data(message)
        record.args = ()
        for name, value in list(vars(record).items()):
            if name != "msg" and isinstance(value, str):
                setattr(record, name, redact_sensitive_data(value))
        return True
