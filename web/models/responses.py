"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 소수점 2자리로 반올림한 JSON 숫자.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    mode: str = Field(..., description="실행 모드 (production/development)")
    version: str = Field(..., description="API 버전")


class MessageResponse(BaseModel):
    """단순 메시지 응답 (삭제 등)"""

    message: str


class UserResponse(BaseModel):
    """사용자 정보"""

    id: str
    email: str


class SignupResponse(BaseModel):
    """회원가입 응답"""

    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    """로그인 응답"""

    token: str = Field(..., description="Bearer 토큰 (JWT)")
    user: UserResponse


class AccountResponse(BaseModel):
    """계좌 응답"""

    account_id: str
    name: str
    icon: str | None = None
    created_at: str
    updated_at: str


class AccountBalanceResponse(AccountResponse):
    """잔액 포함 계좌 응답"""

    balance: float = Field(..., description="원장 기반 잔액")


class CategoryResponse(BaseModel):
    """카테고리 응답"""

    category_id: str
    name: str
    icon: str | None = None
    type: str
    created_at: str
    updated_at: str


class TransactionResponse(BaseModel):
    """거래 응답"""

    transaction_id: str
    account_id: str
    type: str
    amount: float
    category_id: str | None = None
    transfer_group_id: str | None = None
    transfer_role: str | None = None
    note: str | None = None
    created_at: str | None = None


class TransferResponse(BaseModel):
    """이체 응답 (Leg 2건)"""

    transfer_group_id: str
    source_transaction_id: str
    destination_transaction_id: str
    amount: float


class BudgetResponse(BaseModel):
    """예산 응답"""

    budget_id: str
    category_id: str
    amount: float
    month: int
    year: int
    created_at: str
    updated_at: str


class BudgetProgressResponse(BudgetResponse):
    """진행률 포함 예산 응답"""

    category: CategoryResponse | None = None
    spent: float
    remaining: float
    percentage: float
    over_budget: bool


class CategoryTotalResponse(BaseModel):
    """카테고리별 합계"""

    category_id: str
    amount: float


class AccountTypeTotalResponse(BaseModel):
    """계좌/유형별 합계"""

    account_id: str
    type: str
    amount: float


class DashboardResponse(BaseModel):
    """대시보드 요약 응답"""

    total_balance: float
    month_income: float
    month_expense: float
    account_count: int
    recent_transactions: list[TransactionResponse]
