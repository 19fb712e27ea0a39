# -*- coding: utf-8 -*-
"""
Fetch errors and the one-line log format used for them

Every failure inside the batch is turned into an ImageFetchError subclass and
rendered by log_error(); none of them is raised past a single status code.
"""
from typing import Optional
from enum import Enum

import requests


class ErrorSeverity(str, Enum):
    WARNING = "WARNING"  # a re-run may fix it
    ERROR = "ERROR"      # the entry failed


class ImageFetchError(Exception):
    """One failed search, download or write

    Args:
        source: where it happened (UNSPLASH, FS)
        reason: short description
        retryable: whether re-running the batch can help
        details: extra context rendered after the reason
    """

    def __init__(self, source: str, reason: str, retryable: bool = True,
                 severity: ErrorSeverity = ErrorSeverity.ERROR, details: Optional[dict] = None):
        self.source = source
        self.reason = reason
        self.retryable = retryable
        self.severity = severity
        self.details = details or {}
        super().__init__(str(self))

    def __str__(self):
        msg = f"[{self.source}] {self.reason} ({'retryable' if self.retryable else 'not retryable'})"
        if self.details:
            msg += " - " + ", ".join(f"{k}={v}" for k, v in self.details.items())
        return msg


class NetworkError(ImageFetchError):
    def __init__(self, source: str, reason: str, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(source, reason, **kwargs)


class TimeoutError(NetworkError):
    def __init__(self, source: str, operation: str, timeout: int, **kwargs):
        kwargs.setdefault("details", {})["timeout"] = timeout
        super().__init__(source, f"{operation} timed out ({timeout}s)", **kwargs)


class AuthenticationError(ImageFetchError):
    """The service rejected the access key (401/403)"""

    def __init__(self, source: str, reason: str = "authentication failed", **kwargs):
        kwargs.setdefault("retryable", False)
        super().__init__(source, reason, **kwargs)


class NotFoundError(ImageFetchError):
    def __init__(self, source: str, resource: str, **kwargs):
        kwargs.setdefault("retryable", False)
        kwargs.setdefault("severity", ErrorSeverity.WARNING)
        super().__init__(source, f"not found: {resource}", **kwargs)


class StorageError(ImageFetchError):
    """Writing an image under the local directory failed"""

    def __init__(self, path, reason: str, **kwargs):
        kwargs.setdefault("details", {})["path"] = str(path)
        super().__init__("FS", reason, **kwargs)


def format_log(level: str, source: str, operation: str, message: str, **kwargs) -> str:
    """'[LEVEL] [SOURCE] [operation] message (k=v, ...)'"""
    line = f"[{level}] [{source}] [{operation}] {message}"
    if kwargs:
        line += " (" + ", ".join(f"{k}={v}" for k, v in kwargs.items()) + ")"
    return line


def log_error(error: Exception, source: str, operation: str) -> str:
    if isinstance(error, ImageFetchError):
        return format_log(error.severity.value, error.source, operation, error.reason,
                          retryable=error.retryable, **error.details)
    return format_log("ERROR", source, operation, f"{type(error).__name__}: {error}", retryable=True)


def log_success(source: str, operation: str, message: str, **kwargs) -> str:
    return format_log("INFO", source, operation, message, **kwargs)


def log_warning(source: str, operation: str, message: str, **kwargs) -> str:
    return format_log("WARN", source, operation, message, **kwargs)


def from_requests_error(error: Exception, source: str, operation: str, timeout: int = 0) -> ImageFetchError:
    """Map a requests exception (raise_for_status included) onto the error types above"""
    if isinstance(error, requests.exceptions.Timeout):
        return TimeoutError(source, operation, timeout=timeout)

    if isinstance(error, requests.exceptions.ConnectionError):
        return NetworkError(source, "connection failed", details={"error": str(error)})

    if isinstance(error, requests.exceptions.HTTPError):
        status_code = error.response.status_code if error.response is not None else 0
        details = {"status_code": status_code}
        if status_code in (401, 403):
            return AuthenticationError(source, details=details)
        if status_code == 404:
            return NotFoundError(source, operation, details=details)
        # 5xx may go away on a re-run
        return ImageFetchError(source, f"HTTP error: {status_code}", retryable=status_code >= 500, details=details)

    return ImageFetchError(source, f"unexpected error: {type(error).__name__}", details={"error": str(error)})
