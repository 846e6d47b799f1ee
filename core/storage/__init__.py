"""
스토리지 모듈

사용자, 계좌, 카테고리, 예산 저장소 제공
(거래 원장은 core.ledger.LedgerStore)
"""

from core.storage.account_store import AccountStore
from core.storage.budget_store import BudgetStore
from core.storage.category_store import CategoryStore
from core.storage.user_store import DuplicateEmailError, UserStore

__all__ = [
    "AccountStore",
    "BudgetStore",
    "CategoryStore",
    "UserStore",
    "DuplicateEmailError",
]
