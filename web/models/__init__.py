"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountCreateRequest,
    BudgetCreateRequest,
    CategoryCreateRequest,
    LoginRequest,
    SignupRequest,
    TransactionCreateRequest,
    TransferCreateRequest,
)
from web.models.responses import (
    AccountBalanceResponse,
    AccountResponse,
    AccountTypeTotalResponse,
    BudgetProgressResponse,
    BudgetResponse,
    CategoryResponse,
    CategoryTotalResponse,
    DashboardResponse,
    HealthResponse,
    LoginResponse,
    MessageResponse,
    SignupResponse,
    TransactionResponse,
    TransferResponse,
    UserResponse,
)

__all__ = [
    # Requests
    "AccountCreateRequest",
    "BudgetCreateRequest",
    "CategoryCreateRequest",
    "LoginRequest",
    "SignupRequest",
    "TransactionCreateRequest",
    "TransferCreateRequest",
    # Responses
    "AccountBalanceResponse",
    "AccountResponse",
    "AccountTypeTotalResponse",
    "BudgetProgressResponse",
    "BudgetResponse",
    "CategoryResponse",
    "CategoryTotalResponse",
    "DashboardResponse",
    "HealthResponse",
    "LoginResponse",
    "MessageResponse",
    "SignupResponse",
    "TransactionResponse",
    "TransferResponse",
    "UserResponse",
]
