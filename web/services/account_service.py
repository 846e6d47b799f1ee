"""
Account 서비스

계좌 생성/삭제 및 원장 기반 잔액 조회
"""

import logging
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError, ValidationError
from core.ledger import BalanceEngine, LedgerStore
from core.storage import AccountStore
from core.utils.money import to_number

logger = logging.getLogger(__name__)


class AccountService:
    """Account 서비스

    잔액은 저장하지 않고 조회 시마다 BalanceEngine으로 재계산.

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.account_store = AccountStore(db)
        self.engine = BalanceEngine(LedgerStore(db), self.account_store)

    async def create_account(
        self,
        owner_id: str,
        name: str | None,
        icon: str | None = None,
    ) -> dict[str, Any]:
        """계좌 생성

        Raises:
            ValidationError: 이름 누락
        """
        if not name or not name.strip():
            raise ValidationError("Account name is required")

        account = await self.account_store.create(owner_id, name.strip(), icon or None)
        return account.to_dict()

    async def list_accounts_with_balances(self, owner_id: str) -> list[dict[str, Any]]:
        """잔액 포함 계좌 목록"""
        report = await self.engine.get_balances(owner_id)

        result = []
        for balance in report.balances:
            item = balance.to_dict()
            item["balance"] = to_number(balance.balance)
            result.append(item)
        return result

    async def delete_account(self, owner_id: str, account_id: str) -> None:
        """계좌 soft-delete

        Raises:
            NotFoundError: 없음, 이미 삭제됨, 타인 소유
        """
        if not await self.account_store.soft_delete(owner_id, account_id):
            raise NotFoundError("Account not found")
