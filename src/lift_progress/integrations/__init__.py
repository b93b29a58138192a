"""Remote record store integrations."""

from .record_store import HttpRecordStore

__all__ = ["HttpRecordStore"]
