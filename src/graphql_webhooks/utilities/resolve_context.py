from inspect import isawaitable
from typing import Any, Mapping, Optional

__all__ = ["resolve_context"]


async def resolve_context(
    context: Any, inputs: Optional[Mapping[str, Any]] = None
) -> Any:
    """Get the context value for executing an operation.

    The context can be given as a value which is used as it is, or as a function
    which is called with the given inputs (e.g. the incoming request) as keyword
    arguments. The function may be a coroutine function.
    """
    if callable(context):
        context = context(**(inputs or {}))
        if isawaitable(context):
            context = await context
    return context
