"""
Custom exception hierarchy for strhash.

Every failure of a digest call surfaces as a typed exception so callers can
tell environment problems apart from caller mistakes.
"""

from __future__ import annotations


class StrhashException(Exception):
    """
    Base exception for all strhash errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (algorithm, encoding, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class StrhashConfigError(StrhashException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(StrhashConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(StrhashConfigError, ValueError):
    """Invalid or unknown configuration key or value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Hashing Errors
# =============================================================================


class HashingError(StrhashException):
    """Base class for errors raised while computing a digest."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


class AlgorithmUnavailableError(HashingError):
    """
    The cryptographic primitive could not be resolved in this runtime.

    Typically an OpenSSL build or FIPS policy that disables the algorithm.
    This is an environment problem; retrying the same call will not help.
    """

    recoverable: bool = False


class UnsupportedEncodingError(HashingError, LookupError):
    """
    The named text encoding for the secret key is not recognized.

    Inherits from LookupError, which is what codecs.lookup raises.
    """

    def __init__(
        self,
        message: str,
        *,
        encoding: str | None = None,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if encoding is not None:
            ctx["encoding"] = encoding
        super().__init__(message, algorithm=algorithm, context=ctx, cause=cause)


class InvalidKeyError(HashingError, ValueError):
    """Key material cannot be used by the MAC primitive."""

    pass


class UnsupportedOperationError(HashingError, TypeError):
    """
    The requested mode is not supported by the chosen algorithm.

    Raised for keyed calls against a plain digest algorithm and for
    unkeyed calls against a MAC algorithm.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message, algorithm=algorithm, context=ctx, cause=cause)
