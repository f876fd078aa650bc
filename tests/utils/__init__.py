"""Test utilities"""

from .dedent import dedent
from .recording_sink import RecordingSink
from .wait_until import wait_until

__all__ = ["dedent", "RecordingSink", "wait_until"]
