"""
도메인 데이터 모델

DB 행(tuple)을 표준화한 레코드.
모든 금액은 Decimal 타입 사용, 시간은 UTC ISO 문자열 그대로 보관.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from core.types import TransactionType
from core.utils.money import from_db


@dataclass(frozen=True)
class UserRecord:
    """사용자

    Attributes:
        user_id: 사용자 ID (uuid4)
        email: 로그인 이메일 (유니크)
        password_hash: bcrypt 해시
        created_at: 가입 시간 (UTC ISO)
    """

    user_id: str
    email: str
    password_hash: str
    created_at: str

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "UserRecord":
        """(user_id, email, password_hash, created_at) 행에서 생성"""
        return cls(
            user_id=row[0],
            email=row[1],
            password_hash=row[2],
            created_at=row[3],
        )


@dataclass(frozen=True)
class AccountRecord:
    """계좌

    잔액은 저장하지 않음 (항상 원장에서 재계산).
    """

    account_id: str
    owner_id: str
    name: str
    icon: str | None
    created_at: str
    updated_at: str
    is_deleted: bool = False

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "AccountRecord":
        """(account_id, owner_id, name, icon, is_deleted, created_at, updated_at) 행에서 생성"""
        return cls(
            account_id=row[0],
            owner_id=row[1],
            name=row[2],
            icon=row[3],
            is_deleted=bool(row[4]),
            created_at=row[5],
            updated_at=row[6],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "name": self.name,
            "icon": self.icon,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class CategoryRecord:
    """카테고리 (income / expense)"""

    category_id: str
    owner_id: str
    name: str
    icon: str | None
    category_type: str
    created_at: str
    updated_at: str
    is_deleted: bool = False

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "CategoryRecord":
        """(category_id, owner_id, name, icon, category_type, is_deleted, created_at, updated_at) 행에서 생성"""
        return cls(
            category_id=row[0],
            owner_id=row[1],
            name=row[2],
            icon=row[3],
            category_type=row[4],
            is_deleted=bool(row[5]),
            created_at=row[6],
            updated_at=row[7],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "name": self.name,
            "icon": self.icon,
            "type": self.category_type,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class BudgetRecord:
    """월별 예산 (expense 카테고리 전용)"""

    budget_id: str
    owner_id: str
    category_id: str
    amount: Decimal
    month: int
    year: int
    created_at: str
    updated_at: str
    is_deleted: bool = False

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "BudgetRecord":
        """(budget_id, owner_id, category_id, amount, month, year, is_deleted, created_at, updated_at) 행에서 생성"""
        return cls(
            budget_id=row[0],
            owner_id=row[1],
            category_id=row[2],
            amount=from_db(row[3]),
            month=row[4],
            year=row[5],
            is_deleted=bool(row[6]),
            created_at=row[7],
            updated_at=row[8],
        )


@dataclass(frozen=True)
class LedgerTransaction:
    """원장 거래 레코드

    생성 후 불변 (is_deleted 플래그만 변경 가능).
    created_at은 저장 시점에 LedgerStore가 부여하므로 생성 전에는 None.

    Attributes:
        transaction_id: 거래 ID (uuid4)
        owner_id: 소유 사용자
        account_id: 영향을 받는 계좌
        transaction_type: income / expense / transfer
        amount: 양수 금액
        category_id: income/expense 카테고리 (transfer는 None)
        transfer_group_id: 이체 Leg 공유 ID (transfer만)
        transfer_role: SOURCE / DESTINATION (transfer만, 레거시 행은 None)
        note: 메모
        created_at: 저장 시간 (UTC ISO, 마이크로초)
        is_deleted: soft-delete 여부
    """

    transaction_id: str
    owner_id: str
    account_id: str
    transaction_type: str
    amount: Decimal
    category_id: str | None = None
    transfer_group_id: str | None = None
    transfer_role: str | None = None
    note: str | None = None
    created_at: str | None = None
    is_deleted: bool = False

    @property
    def is_transfer(self) -> bool:
        return self.transaction_type == TransactionType.TRANSFER.value

    @classmethod
    def from_row(cls, row: tuple[Any, ...]) -> "LedgerTransaction":
        """LedgerStore.COLUMNS 순서의 행에서 생성"""
        return cls(
            transaction_id=row[0],
            owner_id=row[1],
            account_id=row[2],
            transaction_type=row[3],
            amount=from_db(row[4]),
            category_id=row[5],
            transfer_group_id=row[6],
            transfer_role=row[7],
            note=row[8],
            is_deleted=bool(row[9]),
            created_at=row[10],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "account_id": self.account_id,
            "type": self.transaction_type,
            "amount": self.amount,
            "category_id": self.category_id,
            "transfer_group_id": self.transfer_group_id,
            "transfer_role": self.transfer_role,
            "note": self.note,
            "created_at": self.created_at,
        }
