import logging
from asyncio import create_task
from inspect import isawaitable
from typing import (
    Any,
    Collection,
    Dict,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Union,
    cast,
)
from uuid import uuid4

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLSchema,
    OperationType,
    VariableDefinitionNode,
    subscribe,
)
from graphql.pyutils import Undefined

from ..delivery import DeliverySink, HttpDeliverySink
from ..error import (
    DeliveryError,
    ExecutionError,
    StreamError,
    UnknownSessionIdError,
    UnknownSubscriptionFieldError,
    WebhookError,
)
from ..operation import OperationInfo, build_operation, get_operation_info
from ..utilities import extract_models, parse_variable, resolve_context
from .session import Session, SessionStore, close_stream

__all__ = [
    "SubscriptionManager",
    "BuiltOperation",
    "StartedSubscription",
    "StoppedSubscription",
]

logger = logging.getLogger(__name__)


class BuiltOperation(NamedTuple):
    """Prebuilt subscription document for a subscription field"""

    operation_name: str
    document: DocumentNode
    variables: List[VariableDefinitionNode]


class StartedSubscription(NamedTuple):
    """Response to starting (or updating) a subscription"""

    id: str

    @property
    def formatted(self) -> Dict[str, str]:
        return {"id": self.id}


class StoppedSubscription(NamedTuple):
    """Response to stopping a subscription"""

    id: str

    @property
    def formatted(self) -> Dict[str, str]:
        return {"id": self.id}


class SubscriptionManager:
    """Manager of subscriptions delivering their results to webhooks.

    On creation, an operation document is built for every field of the subscription
    type of the schema. Subscribers pick one of these fields, pass the variables and
    the URL the results should be posted to, and get back the identifier of their
    session. Every result produced by the subscription is then delivered to the URL
    until the subscription is stopped or its stream ends.

    Accepts the following arguments:

    :arg schema:
      The GraphQL schema providing the subscriptions.
    :arg models:
      Names of the object types that are referenced by their ``id`` only when they
      are nested inside a result. Defaults to the types found by
      :func:`~graphql_webhooks.utilities.extract_models`.
    :arg ignore:
      Type names or ``"Type.field"`` references which are always expanded.
    :arg context:
      The context value for executing the subscriptions, or a function (which may
      be asynchronous) creating it from the context inputs passed to :meth:`start`.
    :arg sink:
      The delivery sink used for pushing the results. Defaults to a
      :class:`~graphql_webhooks.delivery.HttpDeliverySink`.
    :arg root_value:
      The root value passed to the subscribe resolvers.
    """

    schema: GraphQLSchema
    models: List[str]
    ignore: List[str]
    context: Any
    sink: DeliverySink
    root_value: Any
    operations: Dict[str, BuiltOperation]
    sessions: SessionStore

    def __init__(
        self,
        schema: GraphQLSchema,
        models: Optional[Collection[str]] = None,
        ignore: Optional[Collection[str]] = None,
        context: Any = None,
        sink: Optional[DeliverySink] = None,
        root_value: Any = None,
    ) -> None:
        if not isinstance(schema, GraphQLSchema):
            raise TypeError("Must provide a GraphQL schema.")
        self.schema = schema
        self.models = extract_models(schema) if models is None else list(models)
        self.ignore = list(ignore or ())
        self.context = context
        self._owns_sink = sink is None
        self.sink = HttpDeliverySink() if sink is None else sink
        self.root_value = root_value
        self.operations = {}
        self.sessions = SessionStore()
        self.build_operations()

    def build_operations(self) -> None:
        subscription_type = self.schema.subscription_type
        if not subscription_type:
            return

        for field_name in subscription_type.fields:
            document = build_operation(
                self.schema,
                OperationType.SUBSCRIPTION,
                field_name,
                self.models,
                self.ignore,
            )
            info = cast(OperationInfo, get_operation_info(document))
            self.operations[field_name] = BuiltOperation(
                cast(str, info.name), document, info.variables
            )
            logger.debug("Built subscription operation %s.", info.name)

    async def start(
        self,
        subscription: str,
        variables: Optional[Mapping[str, Any]],
        url: str,
        context_inputs: Optional[Mapping[str, Any]] = None,
    ) -> Union[StartedSubscription, ExecutionResult]:
        """Start a subscription delivering its results to the given URL.

        Returns the identifier of the new session once the subscription stream has
        been created, without waiting for any result. If the subscription does not
        produce a stream (e.g. because the variables are invalid), the execution
        result describing the errors is returned instead and no session is created.
        """
        operation = self.operations.get(subscription)
        if not operation:
            raise UnknownSubscriptionFieldError(subscription)

        session_id = str(uuid4())
        variable_values = self.parse_variables(operation, variables or {})
        context_value = await resolve_context(self.context, context_inputs)

        try:
            result = subscribe(
                self.schema,
                operation.document,
                root_value=self.root_value,
                context_value=context_value,
                variable_values=variable_values,
                operation_name=operation.operation_name,
            )
            if isawaitable(result):
                result = await result
        except Exception as error:
            raise ExecutionError(subscription, error) from error

        if isinstance(result, ExecutionResult):
            logger.debug("Subscription %r did not produce a stream.", subscription)
            return result

        session = Session(session_id, subscription, url, result)
        self.sessions.add(session)
        session.task = create_task(self.pump(session))
        logger.debug("Started subscription %r with ID %s.", subscription, session_id)
        return StartedSubscription(session_id)

    async def stop(self, id_: str) -> StoppedSubscription:
        """Stop the subscription with the given identifier."""
        session = self.sessions.pop(id_)
        if not session:
            raise UnknownSessionIdError(id_)
        await session.close()
        logger.debug("Stopped subscription with ID %s.", id_)
        return StoppedSubscription(id_)

    async def update(
        self,
        id_: str,
        variables: Optional[Mapping[str, Any]],
        context_inputs: Optional[Mapping[str, Any]] = None,
    ) -> Union[StartedSubscription, ExecutionResult]:
        """Restart the subscription with the given identifier using new variables.

        The subscription is stopped and started again with the same field and URL,
        so the result carries a new identifier which replaces the old one.
        """
        session = self.sessions.get(id_)
        if not session:
            raise UnknownSessionIdError(id_)
        name, url = session.name, session.url
        await self.stop(id_)
        return await self.start(name, variables, url, context_inputs)

    async def close(self) -> None:
        """Stop all subscriptions and release the delivery sink."""
        for session in self.sessions.pop_all():
            await session.close()
        if self._owns_sink:
            await cast(HttpDeliverySink, self.sink).aclose()

    async def __aenter__(self) -> "SubscriptionManager":
        return self

    async def __aexit__(self, *_exc_info: Any) -> None:
        await self.close()

    def parse_variables(
        self, operation: BuiltOperation, variables: Mapping[str, Any]
    ) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for definition in operation.variables:
            name = definition.variable.name.value
            value = parse_variable(variables.get(name), definition, self.schema)
            if value is not Undefined:
                values[name] = value
        return values

    async def pump(self, session: Session) -> None:
        """Deliver the results of a session one after the other.

        The session ends when its stream is exhausted or fails, or when a result
        cannot be delivered. Failures are logged, since nobody waits for this task.
        """
        stream = session.stream
        try:
            while True:
                try:
                    result = await stream.__anext__()
                except StopAsyncIteration:
                    logger.debug("Subscription with ID %s completed.", session.id)
                    break
                except Exception as error:
                    raise StreamError(session.id, error) from error
                await self.deliver(session, result)
        except WebhookError as error:
            logger.error(
                "Subscription with ID %s terminated. %s",
                session.id,
                error.message,
                exc_info=error,
            )
        finally:
            self.sessions.discard(session)
            try:
                await close_stream(stream)
            except Exception as error:
                logger.error(
                    "Stream of subscription with ID %s could not be closed. %s",
                    session.id,
                    error,
                    exc_info=error,
                )

    async def deliver(self, session: Session, result: ExecutionResult) -> None:
        try:
            await self.sink.deliver(session.url, result.formatted)
        except DeliveryError:
            raise
        except Exception as error:
            raise DeliveryError(session.url, error) from error
