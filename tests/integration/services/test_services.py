"""
웹 서비스 계층 통합 테스트

Account / Category / Transaction / Budget / Analytics / Dashboard / Auth
"""

from decimal import Decimal

import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.errors import AuthenticationError, NotFoundError, ValidationError
from core.models import AccountRecord, CategoryRecord
from core.security import decode_access_token
from core.utils.timezone import now_utc
from tests.helpers import OTHER_OWNER_ID, OWNER_ID
from web.services import (
    AccountService,
    AnalyticsService,
    AuthService,
    BudgetService,
    CategoryService,
    DashboardService,
    TransactionService,
)


def _this_month() -> tuple[int, int]:
    now = now_utc()
    return now.month, now.year


class TestAccountService:
    """계좌 + 잔액"""

    @pytest.mark.asyncio
    async def test_create_trims_name(self, db: SQLiteAdapter) -> None:
        account = await AccountService(db).create_account(OWNER_ID, "  Wallet  ", "👛")

        assert account["name"] == "Wallet"
        assert account["icon"] == "👛"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_name_required(self, db: SQLiteAdapter, name: str | None) -> None:
        with pytest.raises(ValidationError, match="Account name is required"):
            await AccountService(db).create_account(OWNER_ID, name, None)

    @pytest.mark.asyncio
    async def test_balances_follow_ledger(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        """잔액은 저장값이 아니라 거래에서 계산"""
        transactions = TransactionService(db)
        await transactions.create_transaction(
            OWNER_ID, "100", "income", cash.account_id, salary.category_id
        )
        await transactions.create_transfer(OWNER_ID, "40", cash.account_id, bank.account_id)

        accounts = await AccountService(db).list_accounts_with_balances(OWNER_ID)

        balances = {a["account_id"]: a["balance"] for a in accounts}
        assert balances == {cash.account_id: 60.0, bank.account_id: 40.0}

    @pytest.mark.asyncio
    async def test_delete_hides_account(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        service = AccountService(db)

        await service.delete_account(OWNER_ID, cash.account_id)

        assert await service.list_accounts_with_balances(OWNER_ID) == []

    @pytest.mark.asyncio
    async def test_delete_foreign_account(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        """다른 사용자 계좌 삭제 불가"""
        with pytest.raises(NotFoundError, match="Account not found"):
            await AccountService(db).delete_account(OTHER_OWNER_ID, cash.account_id)


class TestCategoryService:
    """카테고리"""

    @pytest.mark.asyncio
    async def test_create_and_list(self, db: SQLiteAdapter) -> None:
        service = CategoryService(db)

        created = await service.create_category(OWNER_ID, "Rent", "expense", None)

        listed = await service.list_categories(OWNER_ID)
        assert [c["category_id"] for c in listed] == [created["category_id"]]
        assert listed[0]["type"] == "expense"

    @pytest.mark.asyncio
    async def test_invalid_type(self, db: SQLiteAdapter) -> None:
        with pytest.raises(ValidationError, match="Category type must be"):
            await CategoryService(db).create_category(OWNER_ID, "Gift", "transfer", None)

    @pytest.mark.asyncio
    async def test_delete_missing(self, db: SQLiteAdapter) -> None:
        with pytest.raises(NotFoundError, match="Category not found"):
            await CategoryService(db).delete_category(OWNER_ID, "missing")


class TestTransactionService:
    """거래 생성/조회/삭제"""

    @pytest.mark.asyncio
    async def test_create_income_with_category(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        tx = await TransactionService(db).create_transaction(
            OWNER_ID, "1500.50", "income", cash.account_id, salary.category_id, "May"
        )

        assert tx["amount"] == 1500.5
        assert tx["type"] == "income"
        assert tx["category_id"] == salary.category_id
        assert tx["transfer_group_id"] is None

    @pytest.mark.asyncio
    async def test_category_type_mismatch(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        """income 카테고리로 expense 생성 불가"""
        with pytest.raises(ValidationError, match="Category type must be expense"):
            await TransactionService(db).create_transaction(
                OWNER_ID, "10", "expense", cash.account_id, salary.category_id
            )

    @pytest.mark.asyncio
    async def test_invalid_type(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        with pytest.raises(ValidationError, match="Invalid type"):
            await TransactionService(db).create_transaction(
                OWNER_ID, "10", "refund", cash.account_id
            )

    @pytest.mark.asyncio
    async def test_invalid_amount_checked_first(self, db: SQLiteAdapter) -> None:
        """금액 검증이 유형 검증보다 먼저"""
        with pytest.raises(ValidationError, match="Invalid amount"):
            await TransactionService(db).create_transaction(OWNER_ID, "-1", "refund", None)

    @pytest.mark.asyncio
    async def test_missing_account(self, db: SQLiteAdapter) -> None:
        with pytest.raises(ValidationError, match="account_id is required"):
            await TransactionService(db).create_transaction(OWNER_ID, "10", "income", None)

    @pytest.mark.asyncio
    async def test_missing_category(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        """income / expense는 카테고리 필수"""
        with pytest.raises(ValidationError, match="category_id is required"):
            await TransactionService(db).create_transaction(
                OWNER_ID, "10", "expense", cash.account_id
            )

        assert await TransactionService(db).list_transactions(OWNER_ID) == []

    @pytest.mark.asyncio
    async def test_unknown_account(self, db: SQLiteAdapter, salary: CategoryRecord) -> None:
        with pytest.raises(NotFoundError, match="Account not found"):
            await TransactionService(db).create_transaction(
                OWNER_ID, "10", "income", "missing", salary.category_id
            )

    @pytest.mark.asyncio
    async def test_unknown_category(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        with pytest.raises(NotFoundError, match="Category not found"):
            await TransactionService(db).create_transaction(
                OWNER_ID, "10", "expense", cash.account_id, "missing"
            )

    @pytest.mark.asyncio
    async def test_transfer_type_delegates(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
    ) -> None:
        """type=transfer → account_id 출금, to_account_id 입금"""
        service = TransactionService(db)

        result = await service.create_transaction(
            OWNER_ID, "25", "transfer", cash.account_id, to_account_id=bank.account_id
        )

        assert result["amount"] == 25.0
        assert result["source_transaction_id"] != result["destination_transaction_id"]
        listed = await service.list_transactions(OWNER_ID)
        assert {tx["transfer_group_id"] for tx in listed} == {result["transfer_group_id"]}

    @pytest.mark.asyncio
    async def test_list_newest_first(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        service = TransactionService(db)
        older = await service.create_transaction(
            OWNER_ID, "1", "income", cash.account_id, salary.category_id
        )
        newer = await service.create_transaction(
            OWNER_ID, "2", "income", cash.account_id, salary.category_id
        )

        listed = await service.list_transactions(OWNER_ID)

        assert [tx["transaction_id"] for tx in listed] == [
            newer["transaction_id"],
            older["transaction_id"],
        ]

    @pytest.mark.asyncio
    async def test_delete(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        service = TransactionService(db)
        tx = await service.create_transaction(
            OWNER_ID, "1", "income", cash.account_id, salary.category_id
        )

        await service.delete_transaction(OWNER_ID, tx["transaction_id"])

        assert await service.list_transactions(OWNER_ID) == []
        with pytest.raises(NotFoundError, match="Transaction not found"):
            await service.delete_transaction(OWNER_ID, tx["transaction_id"])

    @pytest.mark.asyncio
    async def test_huge_amount_rejected_reads_keep_working(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        salary: CategoryRecord,
    ) -> None:
        """상한 초과 금액은 저장되지 않아 이후 잔액/목록 조회가 깨지지 않음"""
        service = TransactionService(db)
        await service.create_transaction(
            OWNER_ID, "10", "income", cash.account_id, salary.category_id
        )

        with pytest.raises(ValidationError, match="Invalid amount"):
            await service.create_transaction(
                OWNER_ID, 1e30, "income", cash.account_id, salary.category_id
            )

        assert [tx["amount"] for tx in await service.list_transactions(OWNER_ID)] == [10.0]
        accounts = await AccountService(db).list_accounts_with_balances(OWNER_ID)
        assert accounts[0]["balance"] == 10.0


class TestBudgetService:
    """예산 + 진행률"""

    @pytest.mark.asyncio
    async def test_progress(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        groceries: CategoryRecord,
    ) -> None:
        month, year = _this_month()
        await BudgetService(db).create_budget(OWNER_ID, "200", month, year, groceries.category_id)
        transactions = TransactionService(db)
        await transactions.create_transaction(
            OWNER_ID, "50", "expense", cash.account_id, groceries.category_id
        )
        await transactions.create_transaction(
            OWNER_ID, "25.25", "expense", cash.account_id, groceries.category_id
        )

        budgets = await BudgetService(db).list_budgets(OWNER_ID, month, year)

        assert len(budgets) == 1
        item = budgets[0]
        assert item["category"]["name"] == "Groceries"
        assert item["spent"] == 75.25
        assert item["remaining"] == 124.75
        assert item["percentage"] == 37.63
        assert item["over_budget"] is False

    @pytest.mark.asyncio
    async def test_over_budget(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        groceries: CategoryRecord,
    ) -> None:
        month, year = _this_month()
        await BudgetService(db).create_budget(OWNER_ID, "10", month, year, groceries.category_id)
        await TransactionService(db).create_transaction(
            OWNER_ID, "12", "expense", cash.account_id, groceries.category_id
        )

        item = (await BudgetService(db).list_budgets(OWNER_ID, month, year))[0]

        assert item["remaining"] == -2.0
        assert item["over_budget"] is True

    @pytest.mark.asyncio
    async def test_duplicate_rejected(self, db: SQLiteAdapter, groceries: CategoryRecord) -> None:
        service = BudgetService(db)
        await service.create_budget(OWNER_ID, "100", 3, 2024, groceries.category_id)

        with pytest.raises(ValidationError, match="Budget already exists"):
            await service.create_budget(OWNER_ID, "150", 3, 2024, groceries.category_id)

    @pytest.mark.asyncio
    async def test_income_category_rejected(self, db: SQLiteAdapter, salary: CategoryRecord) -> None:
        with pytest.raises(NotFoundError, match="not an expense category"):
            await BudgetService(db).create_budget(OWNER_ID, "100", 3, 2024, salary.category_id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("amount", "month", "year", "message"),
        [
            ("0", 3, 2024, "Valid amount is required"),
            ("100", 13, 2024, "Month must be between 1 and 12"),
            ("100", 3, 1999, "Invalid year"),
            ("100", None, 2024, "Month and year are required"),
        ],
    )
    async def test_validation(
        self,
        db: SQLiteAdapter,
        groceries: CategoryRecord,
        amount: str,
        month: int | None,
        year: int,
        message: str,
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            await BudgetService(db).create_budget(
                OWNER_ID, amount, month, year, groceries.category_id
            )

    @pytest.mark.asyncio
    async def test_category_required(self, db: SQLiteAdapter) -> None:
        with pytest.raises(ValidationError, match="Category is required"):
            await BudgetService(db).create_budget(OWNER_ID, "100", 3, 2024, None)

    @pytest.mark.asyncio
    async def test_delete(self, db: SQLiteAdapter, groceries: CategoryRecord) -> None:
        service = BudgetService(db)
        budget = await service.create_budget(OWNER_ID, "100", 3, 2024, groceries.category_id)

        await service.delete_budget(OWNER_ID, budget["budget_id"])

        assert await service.list_budgets(OWNER_ID, 3, 2024) == []
        with pytest.raises(NotFoundError, match="Budget not found"):
            await service.delete_budget(OWNER_ID, budget["budget_id"])


class TestAnalyticsService:
    """월별 집계"""

    @pytest.mark.asyncio
    async def test_grouping(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
        salary: CategoryRecord,
        groceries: CategoryRecord,
    ) -> None:
        transactions = TransactionService(db)
        await transactions.create_transaction(
            OWNER_ID, "1000", "income", cash.account_id, salary.category_id
        )
        await transactions.create_transaction(
            OWNER_ID, "30", "expense", cash.account_id, groceries.category_id
        )
        await transactions.create_transaction(
            OWNER_ID, "20", "expense", bank.account_id, groceries.category_id
        )
        month, year = _this_month()
        service = AnalyticsService(db)

        expenses = await service.expense_by_category(OWNER_ID, month, year)
        incomes = await service.income_by_category(OWNER_ID, str(month), str(year))
        by_account = await service.account_analysis(OWNER_ID, month, year)

        assert {e["category_id"]: e["amount"] for e in expenses} == {
            groceries.category_id: 50.0,
        }
        assert incomes == [{"category_id": salary.category_id, "amount": 1000.0}]
        assert by_account == [
            {"account_id": cash.account_id, "type": "income", "amount": 1000.0},
            {"account_id": cash.account_id, "type": "expense", "amount": 30.0},
            {"account_id": bank.account_id, "type": "expense", "amount": 20.0},
        ]

    @pytest.mark.asyncio
    async def test_other_month_empty(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        groceries: CategoryRecord,
    ) -> None:
        await TransactionService(db).create_transaction(
            OWNER_ID, "30", "expense", cash.account_id, groceries.category_id
        )
        month, year = _this_month()

        assert await AnalyticsService(db).expense_by_category(OWNER_ID, month, year - 1) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("month", "year", "message"),
        [
            (None, 2024, "Month and year are required"),
            ("abc", 2024, "Invalid month"),
            (0, 2024, "Invalid month"),
            (5, "20x4", "Invalid year"),
        ],
    )
    async def test_invalid_period(
        self,
        db: SQLiteAdapter,
        month: object,
        year: object,
        message: str,
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            await AnalyticsService(db).account_analysis(OWNER_ID, month, year)


class TestDashboardService:
    """대시보드 요약"""

    @pytest.mark.asyncio
    async def test_summary(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
        salary: CategoryRecord,
        groceries: CategoryRecord,
    ) -> None:
        transactions = TransactionService(db)
        await transactions.create_transaction(
            OWNER_ID, "100", "income", cash.account_id, salary.category_id
        )
        await transactions.create_transaction(
            OWNER_ID, "15.5", "expense", cash.account_id, groceries.category_id
        )
        await transactions.create_transfer(OWNER_ID, "40", cash.account_id, bank.account_id)

        summary = await DashboardService(db).get_summary(OWNER_ID)

        assert summary["total_balance"] == 84.5
        assert summary["month_income"] == 100.0
        assert summary["month_expense"] == 15.5
        assert summary["account_count"] == 2
        assert len(summary["recent_transactions"]) == 4

    @pytest.mark.asyncio
    async def test_empty_user(self, db: SQLiteAdapter) -> None:
        summary = await DashboardService(db).get_summary(OTHER_OWNER_ID)

        assert summary == {
            "total_balance": 0.0,
            "month_income": 0.0,
            "month_expense": 0.0,
            "account_count": 0,
            "recent_transactions": [],
        }


class TestAuthService:
    """회원가입 / 로그인"""

    @pytest.fixture
    def settings(self, temp_secrets_file) -> Settings:
        Settings.reset()
        settings = Settings(temp_secrets_file)
        yield settings
        Settings.reset()

    @pytest.mark.asyncio
    async def test_signup_then_login(self, db: SQLiteAdapter, settings: Settings) -> None:
        service = AuthService(db, settings)

        created = await service.signup("New.User@Example.com", "secret1")
        logged_in = await service.login("new.user@example.com", "secret1")

        assert created["message"] == "User created"
        assert created["user"]["email"] == "new.user@example.com"
        assert logged_in["user"]["id"] == created["user"]["id"]
        assert (
            decode_access_token(logged_in["token"], settings.web_secret_key)
            == created["user"]["id"]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("email", "password", "message"),
        [
            (None, "secret1", "Email and password are required"),
            ("not-an-email", "secret1", "Invalid email format"),
            ("short@example.com", "12345", "Password must be at least 6 characters"),
            ("long@example.com", "a" * 73, "Password must be at most 72 bytes"),
            ("multi@example.com", "가" * 25, "Password must be at most 72 bytes"),
        ],
    )
    async def test_signup_validation(
        self,
        db: SQLiteAdapter,
        settings: Settings,
        email: str | None,
        password: str,
        message: str,
    ) -> None:
        with pytest.raises(ValidationError, match=message):
            await AuthService(db, settings).signup(email, password)

    @pytest.mark.asyncio
    async def test_duplicate_email(self, db: SQLiteAdapter, settings: Settings) -> None:
        service = AuthService(db, settings)
        await service.signup("dup@example.com", "secret1")

        with pytest.raises(ValidationError, match="User already exists"):
            await service.signup("DUP@example.com", "secret2")

    @pytest.mark.asyncio
    async def test_wrong_password(self, db: SQLiteAdapter, settings: Settings) -> None:
        service = AuthService(db, settings)
        await service.signup("me@example.com", "secret1")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await service.login("me@example.com", "wrong-password")

    @pytest.mark.asyncio
    async def test_overlong_password_login(self, db: SQLiteAdapter, settings: Settings) -> None:
        """72바이트 초과 비밀번호 로그인은 인증 실패로 처리"""
        service = AuthService(db, settings)
        await service.signup("me@example.com", "secret1")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await service.login("me@example.com", "a" * 100)

    @pytest.mark.asyncio
    async def test_unknown_email(self, db: SQLiteAdapter, settings: Settings) -> None:
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await AuthService(db, settings).login("ghost@example.com", "secret1")
