# pytest configuration

from pytest import fixture

from .chat_schema import MessageBroker, create_chat_schema
from .utils import RecordingSink


@fixture
def broker():
    return MessageBroker()


@fixture
def chat_schema(broker):
    return create_chat_schema(broker)


@fixture
def sink():
    return RecordingSink()
