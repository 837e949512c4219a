"""
Pydantic models for Common Log Format records.
"""

from common_log_format.models.log_entry import LogEntry
from common_log_format.models.status import StatusCode

__all__ = [
    "LogEntry",
    "StatusCode",
]
