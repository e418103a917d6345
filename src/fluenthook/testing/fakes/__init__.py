"""Testing fakes – in-memory doubles for the connection port."""
from fluenthook.testing.fakes.connection import FailingConnection, RecordingConnection, SentRecord

__all__ = ["FailingConnection", "RecordingConnection", "SentRecord"]
