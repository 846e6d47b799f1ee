"""
거래 원장 (Ledger) 시스템

계좌 잔액은 저장하지 않고 원장(transactions)에서 매번 재계산.
이체는 SOURCE/DESTINATION Leg 2건으로 원자적으로 기록.

사용 예시:
```python
from core.ledger import BalanceEngine, LedgerStore, ReferenceGuard, TransferPairBuilder
from core.storage.account_store import AccountStore

ledger_store = LedgerStore(db)

# 이체 생성
builder = TransferPairBuilder(ledger_store, ReferenceGuard(db))
result = await builder.create_transfer(owner_id, "20.00", cash_id, bank_id)

# 잔액 조회
engine = BalanceEngine(ledger_store, AccountStore(db))
report = await engine.get_balances(owner_id)
```
"""

from core.ledger.balance import (
    AccountBalance,
    AnomalyKind,
    BalanceEngine,
    BalanceReport,
    TransferAnomaly,
    compute_balances,
    resolve_transfer_roles,
)
from core.ledger.guards import ReferenceGuard
from core.ledger.store import LedgerStore
from core.ledger.transfer import TransferPairBuilder, TransferResult, build_transfer_legs

__all__ = [
    # 핵심 클래스
    "LedgerStore",
    "BalanceEngine",
    "TransferPairBuilder",
    "ReferenceGuard",
    # 결과 타입
    "AccountBalance",
    "BalanceReport",
    "TransferAnomaly",
    "TransferResult",
    "AnomalyKind",
    # 함수
    "compute_balances",
    "resolve_transfer_roles",
    "build_transfer_legs",
]
