"""
Centralized enumerations for the cooperative system.
"""
from enum import Enum


# ============================================================================
# LEDGER ENUMS
# ============================================================================

class TransactionType(str, Enum):
    """Movement recorded on a member's shares or savings ledger"""
    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"


# ============================================================================
# SESSION ENUMS
# ============================================================================

class SessionKind(str, Enum):
    """What a session row authenticates"""
    COOPERATIVE = "cooperative"
    ADMIN = "admin"
    REGISTRATION = "registration"
