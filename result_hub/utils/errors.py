"""Error handling utilities.

This module provides the exception hierarchy for Result Hub. It defines a base
ResultHubError class and specialized subclasses for the provider, ranking,
result-set and edit-script failures that can occur in the pipeline.
"""

from typing import Any, TypeVar

# Type variable for self-referential return types
T = TypeVar("T", bound="ResultHubError")


class ResultHubError(Exception):
    """Base class for all exceptions raised by the pipeline.

    All custom exceptions should inherit from this class to ensure consistent
    error handling throughout the application.
    """

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        original_error: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize the error with context information.

        Args:
            message: Human-readable error message
            provider: Id of the provider involved, if applicable
            original_error: The original exception that caused this error, if any
            details: Additional structured details about the error
        """
        self.message = message
        self.provider = provider
        self.original_error = original_error
        self.details = details or {}
        super().__init__(message)

    @classmethod
    def from_exception(
        cls: type[T], exc: Exception, message: str | None = None, **kwargs
    ) -> T:
        """Create an error instance from another exception.

        Args:
            exc: The exception to wrap
            message: Custom message to use (defaults to str(exc))
            **kwargs: Additional arguments to pass to the constructor

        Returns:
            A new instance of the error class
        """
        return cls(message=message or str(exc), original_error=exc, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert the error to a dictionary representation.

        Returns:
            A dictionary containing error details suitable for serialization
        """
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }

        if self.provider:
            result["provider"] = self.provider

        if self.details:
            result["details"] = self.details

        if self.original_error is not None:
            result["original_error"] = repr(self.original_error)

        return result


# Provider-related errors


class ProviderError(ResultHubError):
    """Base class for errors related to result providers."""


class InvalidProviderError(ProviderError):
    """Error raised when a batch is delivered under an unusable provider id."""

    def __init__(self, provider: Any, message: str | None = None, **kwargs):
        """Initialize an invalid provider error.

        Args:
            provider: The rejected provider id
            message: Error message (defaults to a standard message)
            **kwargs: Additional arguments passed to ProviderError
        """
        message = message or f"Invalid provider id: {provider!r}"
        details = kwargs.pop("details", {})
        details["provider_id_type"] = type(provider).__name__
        super().__init__(message, details=details, **kwargs)


# Ranking errors


class RankingError(ResultHubError):
    """Error raised when the external ranker fails.

    The controller never propagates this error; it is recorded and the merged
    order is published unranked.
    """

    def __init__(
        self,
        message: str,
        ranker: str | None = None,
        query: str | None = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if ranker:
            details["ranker"] = ranker
        if query is not None:
            details["query"] = query
        super().__init__(message, details=details, **kwargs)


# Result set errors


class ResultSetError(ResultHubError):
    """Base class for errors raised by the result set controller."""


class ReentrantDisplayError(ResultSetError):
    """Error raised when a display is requested while one is still running."""

    def __init__(self, query: str | None = None, message: str | None = None, **kwargs):
        message = message or "display_search_results called while a merge is running"
        details = kwargs.pop("details", {})
        if query is not None:
            details["query"] = query
        super().__init__(message, details=details, **kwargs)


class EditScriptError(ResultHubError):
    """Error raised when an edit script does not fit the list it is applied to."""

    def __init__(
        self,
        message: str,
        operation: Any | None = None,
        size: int | None = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if operation is not None:
            details["operation"] = str(operation)
        if size is not None:
            details["size"] = size
        super().__init__(message, details=details, **kwargs)
