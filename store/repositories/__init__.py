"""
Repository package for database operations.
Following Repository Pattern for clean separation of data access logic.
"""
from .base import BaseRepository
from .session import SessionRepository
from .cooperative import (
    CooperativeRepository,
    CooperativeAccountRepository,
    AdminAccountRepository,
)
from .member import MemberRepository, MemberAccountRepository, DependentRepository
from .transaction import (
    LedgerRepository,
    ShareTransactionRepository,
    SavingTransactionRepository,
)
from .loan import LoanRepository, RepaymentRepository
from .reward import RewardRepository, GivenRewardRepository
from .criteria import (
    CriteriaRepository,
    CriteriaFieldRepository,
    CategoryRepository,
    ScoreRepository,
)

__all__ = [
    "BaseRepository",
    "SessionRepository",
    "CooperativeRepository",
    "CooperativeAccountRepository",
    "AdminAccountRepository",
    "MemberRepository",
    "MemberAccountRepository",
    "DependentRepository",
    "LedgerRepository",
    "ShareTransactionRepository",
    "SavingTransactionRepository",
    "LoanRepository",
    "RepaymentRepository",
    "RewardRepository",
    "GivenRewardRepository",
    "CriteriaRepository",
    "CriteriaFieldRepository",
    "CategoryRepository",
    "ScoreRepository",
]
