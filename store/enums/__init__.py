"""
Enums package for system-wide enumerations.
"""
from .enums import (
    TransactionType,
    SessionKind,
)

__all__ = [
    "TransactionType",
    "SessionKind",
]
