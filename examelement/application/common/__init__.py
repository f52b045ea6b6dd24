"""
Application common module.

- UnitOfWork: transaction boundary for multi-row writes
- ClockProtocol: server-side source of time
"""

from .clock import ClockProtocol
from .unit_of_work import UnitOfWork

__all__ = [
    "ClockProtocol",
    "UnitOfWork",
]
