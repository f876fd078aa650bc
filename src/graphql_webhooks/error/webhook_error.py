from typing import Any, Dict, Optional

__all__ = [
    "WebhookError",
    "UnknownOperationFieldError",
    "UnknownSubscriptionFieldError",
    "UnknownSessionIdError",
    "ExecutionError",
    "DeliveryError",
    "StreamError",
]


class WebhookError(Exception):
    """Webhook Error

    Base class of all errors raised while building operations or while running
    subscription sessions. In addition to a message, it may carry the error that
    caused it.
    """

    message: str
    """A message describing the Error for debugging purposes"""

    original_error: Optional[BaseException]
    """The underlying error, if this error wraps another one"""

    __slots__ = ("message", "original_error")

    __hash__ = Exception.__hash__

    def __init__(
        self, message: str, original_error: Optional[BaseException] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        if original_error:
            self.__cause__ = original_error

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.original_error:
            args.append(f"original_error={self.original_error!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, WebhookError)
            and self.__class__ == other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get error formatted like a GraphQL response error."""
        return {"message": self.message}


class UnknownOperationFieldError(WebhookError):
    """An operation was requested for a field the schema does not define."""

    __slots__ = ("operation", "field_name")

    def __init__(self, operation: str, field_name: str) -> None:
        super().__init__(
            f"The {operation} field '{field_name}' is not defined in the schema."
        )
        self.operation = operation
        self.field_name = field_name


class UnknownSubscriptionFieldError(WebhookError):
    """A session was started for a field without a prebuilt subscription."""

    __slots__ = ("field_name",)

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Subscription '{field_name}' is not available.")
        self.field_name = field_name


class UnknownSessionIdError(WebhookError):
    """A session identifier does not refer to an active session."""

    __slots__ = ("session_id",)

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Subscription with ID '{session_id}' does not exist.")
        self.session_id = session_id


class ExecutionError(WebhookError):
    """Executing a subscription document failed unexpectedly.

    Errors that GraphQL reports inside an execution result (invalid variables,
    failing subscribe resolvers) are returned as result and not raised.
    """

    __slots__ = ("field_name",)

    def __init__(self, field_name: str, original_error: BaseException) -> None:
        super().__init__(
            f"Subscription '{field_name}' could not be executed: {original_error}",
            original_error,
        )
        self.field_name = field_name


class DeliveryError(WebhookError):
    """Pushing a result to a callback URL failed."""

    __slots__ = ("url",)

    def __init__(
        self, url: str, original_error: Optional[BaseException] = None
    ) -> None:
        message = f"Delivery to '{url}' failed"
        message = f"{message}: {original_error}" if original_error else f"{message}."
        super().__init__(message, original_error)
        self.url = url


class StreamError(WebhookError):
    """The result stream of a session raised an error."""

    __slots__ = ("session_id",)

    def __init__(self, session_id: str, original_error: BaseException) -> None:
        super().__init__(
            f"Stream of subscription '{session_id}' failed: {original_error}",
            original_error,
        )
        self.session_id = session_id
