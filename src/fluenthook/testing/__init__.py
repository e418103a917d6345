"""Testing – fakes and property-based strategies for code using fluenthook.

``fluenthook.testing.generators`` needs ``hypothesis``; import it explicitly.
"""
from fluenthook.testing.fakes import FailingConnection, RecordingConnection, SentRecord

__all__ = ["FailingConnection", "RecordingConnection", "SentRecord"]
