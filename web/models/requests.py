"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
형식만 검증하고 값 검증(금액 > 0, 계좌 존재 등)은 서비스 계층에서 수행.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """회원가입 요청"""

    email: str | None = Field(default=None, description="로그인 이메일")
    password: str | None = Field(default=None, description="비밀번호 (6자 이상)")


class LoginRequest(BaseModel):
    """로그인 요청"""

    email: str | None = Field(default=None, description="로그인 이메일")
    password: str | None = Field(default=None, description="비밀번호")


class AccountCreateRequest(BaseModel):
    """계좌 생성 요청"""

    name: str | None = Field(default=None, description="계좌 이름")
    icon: str | None = Field(default=None, description="아이콘")


class CategoryCreateRequest(BaseModel):
    """카테고리 생성 요청"""

    name: str | None = Field(default=None, description="카테고리 이름")
    icon: str | None = Field(default=None, description="아이콘")
    type: str | None = Field(default=None, description="income / expense")


class TransactionCreateRequest(BaseModel):
    """거래 생성 요청

    type=transfer인 경우 account_id가 출금, to_account_id가 입금 계좌.
    """

    amount: Decimal | None = Field(default=None, description="금액 (> 0)")
    type: str | None = Field(default=None, description="income / expense / transfer")
    account_id: str | None = Field(default=None, description="계좌 ID")
    category_id: str | None = Field(default=None, description="카테고리 ID (income/expense)")
    to_account_id: str | None = Field(default=None, description="입금 계좌 ID (transfer)")
    note: str | None = Field(default=None, description="메모")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"amount": 12.5, "type": "expense", "account_id": "...", "category_id": "..."},
                {"amount": 100, "type": "transfer", "account_id": "...", "to_account_id": "..."},
            ]
        }
    }


class TransferCreateRequest(BaseModel):
    """이체 요청"""

    amount: Decimal | None = Field(default=None, description="이체 금액 (> 0)")
    source_account_id: str | None = Field(default=None, description="출금 계좌 ID")
    destination_account_id: str | None = Field(default=None, description="입금 계좌 ID")
    note: str | None = Field(default=None, description="메모")


class BudgetCreateRequest(BaseModel):
    """예산 생성 요청"""

    amount: Decimal | None = Field(default=None, description="예산 금액 (> 0)")
    month: int | None = Field(default=None, description="월 (1-12)")
    year: int | None = Field(default=None, description="연도 (2000-2100)")
    category_id: str | None = Field(default=None, description="expense 카테고리 ID")
