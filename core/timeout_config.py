# -*- coding: utf-8 -*-
"""
Timeout settings

Every outbound call has a timeout so a stalled search or download cannot hang
the batch.
"""

# Per-source timeouts (seconds)
TIMEOUT_CONFIG = {
    "UNSPLASH": {
        "search": 10,      # JSON search endpoint
        "download": 30,    # image bytes from the CDN
    },
}

# Default timeout (seconds)
DEFAULT_TIMEOUT = 10


def get_timeout(source: str, operation: str) -> int:
    """
    Timeout for one source and operation

    Args:
        source: source name (UNSPLASH)
        operation: operation type (search, download)

    Returns:
        timeout in seconds
    """
    if source in TIMEOUT_CONFIG:
        return TIMEOUT_CONFIG[source].get(operation, DEFAULT_TIMEOUT)
    return DEFAULT_TIMEOUT
