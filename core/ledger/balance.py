"""
잔액 재계산 엔진

삭제되지 않은 전체 거래 원장에서 계좌별 잔액을 매 조회마다 처음부터 계산.
저장된 잔액, 캐시, 증분 갱신 없음.

계산 규칙:
- income: +amount
- expense: -amount
- transfer SOURCE Leg: -amount
- transfer DESTINATION Leg: +amount
- 최종 합계에 한 번만 소수점 2자리 ROUND_HALF_UP 반올림

이체 방향 결정:
1. 두 Leg 모두 transfer_role이 있고 SOURCE/DESTINATION 한 쌍이면 그대로 사용
2. 두 Leg 모두 role이 없으면 (created_at, transaction_id) 오름차순으로
   앞선 Leg를 SOURCE로 간주 (동일 timestamp는 transaction_id로 결정)
3. 그 외 (Leg 수 != 2, role 충돌, group ID 없음)는 이상 데이터로 기록하고
   잔액에 반영하지 않음
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

from core.models import AccountRecord, LedgerTransaction
from core.types import TransactionType, TransferRole
from core.utils.money import round_money

if TYPE_CHECKING:
    from core.ledger.store import LedgerStore
    from core.storage.account_store import AccountStore

logger = logging.getLogger(__name__)


class AnomalyKind(str, Enum):
    """이체 그룹 이상 유형"""

    ORPHAN_LEG = "ORPHAN_LEG"  # 짝 Leg가 삭제되어 1건만 남음
    GROUP_SIZE = "GROUP_SIZE"  # Leg가 3건 이상
    ROLE_CONFLICT = "ROLE_CONFLICT"  # role이 SOURCE/DESTINATION 한 쌍이 아님
    MISSING_GROUP = "MISSING_GROUP"  # transfer인데 group ID 없음


@dataclass(frozen=True)
class TransferAnomaly:
    """방향을 결정할 수 없는 이체 그룹 (잔액 기여 0)"""

    kind: AnomalyKind
    transfer_group_id: str | None
    transaction_ids: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "transfer_group_id": self.transfer_group_id,
            "transaction_ids": list(self.transaction_ids),
        }


@dataclass(frozen=True)
class AccountBalance:
    """계좌 잔액 (계좌 메타데이터 포함)"""

    account_id: str
    name: str
    icon: str | None
    balance: Decimal
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "name": self.name,
            "icon": self.icon,
            "balance": self.balance,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class BalanceReport:
    """잔액 계산 결과"""

    balances: list[AccountBalance] = field(default_factory=list)
    anomalies: list[TransferAnomaly] = field(default_factory=list)

    def by_account(self) -> dict[str, Decimal]:
        """{account_id: balance} 매핑"""
        return {b.account_id: b.balance for b in self.balances}

    @property
    def total(self) -> Decimal:
        """전체 계좌 잔액 합계 (각 계좌는 이미 반올림됨)"""
        return sum((b.balance for b in self.balances), Decimal("0.00"))


def _leg_order_key(tx: LedgerTransaction) -> tuple[str, str]:
    return (tx.created_at or "", tx.transaction_id)


def resolve_transfer_roles(
    transactions: Iterable[LedgerTransaction],
) -> tuple[dict[str, TransferRole], list[TransferAnomaly]]:
    """이체 Leg별 방향 결정

    Args:
        transactions: 삭제되지 않은 거래 (transfer 외 유형은 무시)

    Returns:
        ({transaction_id: TransferRole}, 이상 그룹 목록)
    """
    groups: dict[str, list[LedgerTransaction]] = defaultdict(list)
    anomalies: list[TransferAnomaly] = []

    for tx in transactions:
        if not tx.is_transfer:
            continue
        if not tx.transfer_group_id:
            anomalies.append(
                TransferAnomaly(
                    kind=AnomalyKind.MISSING_GROUP,
                    transfer_group_id=None,
                    transaction_ids=(tx.transaction_id,),
                )
            )
            continue
        groups[tx.transfer_group_id].append(tx)

    roles: dict[str, TransferRole] = {}

    for group_id, legs in groups.items():
        leg_ids = tuple(leg.transaction_id for leg in sorted(legs, key=_leg_order_key))

        if len(legs) == 1:
            anomalies.append(
                TransferAnomaly(AnomalyKind.ORPHAN_LEG, group_id, leg_ids)
            )
            continue

        if len(legs) != 2:
            anomalies.append(
                TransferAnomaly(AnomalyKind.GROUP_SIZE, group_id, leg_ids)
            )
            continue

        stored_roles = {leg.transfer_role for leg in legs}

        if stored_roles == {TransferRole.SOURCE.value, TransferRole.DESTINATION.value}:
            for leg in legs:
                roles[leg.transaction_id] = TransferRole(leg.transfer_role)
        elif stored_roles == {None}:
            # 레거시 행: 먼저 기록된 Leg가 출금
            first, second = sorted(legs, key=_leg_order_key)
            roles[first.transaction_id] = TransferRole.SOURCE
            roles[second.transaction_id] = TransferRole.DESTINATION
        else:
            anomalies.append(
                TransferAnomaly(AnomalyKind.ROLE_CONFLICT, group_id, leg_ids)
            )

    return roles, anomalies


def _log_anomalies(anomalies: list[TransferAnomaly]) -> None:
    for anomaly in anomalies:
        if anomaly.kind == AnomalyKind.ORPHAN_LEG:
            # 한쪽 Leg만 삭제된 이체
            logger.info(
                f"Orphan transfer leg ignored: group={anomaly.transfer_group_id} "
                f"legs={list(anomaly.transaction_ids)}"
            )
        else:
            logger.warning(
                f"Transfer integrity anomaly ({anomaly.kind.value}): "
                f"group={anomaly.transfer_group_id} legs={list(anomaly.transaction_ids)}"
            )


def compute_balances(
    accounts: Iterable[AccountRecord],
    transactions: Iterable[LedgerTransaction],
) -> BalanceReport:
    """계좌별 잔액 계산 (순수 함수)

    Args:
        accounts: 사용자 계좌 (삭제된 계좌는 제외됨)
        transactions: 사용자 전체 거래 (삭제된 거래는 제외됨)

    Returns:
        BalanceReport (계좌 순서 유지, 이상 이체 그룹 포함)
    """
    active_accounts = [a for a in accounts if not a.is_deleted]
    active_transactions = [t for t in transactions if not t.is_deleted]

    roles, anomalies = resolve_transfer_roles(active_transactions)

    totals: dict[str, Decimal] = {a.account_id: Decimal("0") for a in active_accounts}

    for tx in active_transactions:
        if tx.account_id not in totals:
            continue

        if tx.transaction_type == TransactionType.INCOME.value:
            totals[tx.account_id] += tx.amount
        elif tx.transaction_type == TransactionType.EXPENSE.value:
            totals[tx.account_id] -= tx.amount
        elif tx.is_transfer:
            role = roles.get(tx.transaction_id)
            if role == TransferRole.SOURCE:
                totals[tx.account_id] -= tx.amount
            elif role == TransferRole.DESTINATION:
                totals[tx.account_id] += tx.amount

    _log_anomalies(anomalies)

    balances = [
        AccountBalance(
            account_id=account.account_id,
            name=account.name,
            icon=account.icon,
            balance=round_money(totals[account.account_id]),
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
        for account in active_accounts
    ]

    return BalanceReport(balances=balances, anomalies=anomalies)


class BalanceEngine:
    """계좌 잔액 조회기

    요청마다 원장 전체를 다시 읽어 계산.

    Args:
        ledger_store: 거래 원장 저장소
        account_store: 계좌 저장소

    사용 예시:
    ```python
    engine = BalanceEngine(LedgerStore(db), AccountStore(db))
    report = await engine.get_balances(owner_id)
    for item in report.balances:
        print(item.name, item.balance)
    ```
    """

    def __init__(self, ledger_store: LedgerStore, account_store: AccountStore):
        self.ledger_store = ledger_store
        self.account_store = account_store

    async def get_balances(self, owner_id: str) -> BalanceReport:
        """사용자 계좌별 현재 잔액"""
        accounts = await self.account_store.list_accounts(owner_id)
        transactions = await self.ledger_store.list_transactions(owner_id)

        report = compute_balances(accounts, transactions)

        logger.debug(
            f"Balances computed: owner={owner_id} accounts={len(accounts)} "
            f"transactions={len(transactions)} anomalies={len(report.anomalies)}"
        )
        return report
