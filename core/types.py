"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class AppMode(str, Enum):
    """실행 모드 (운영 / 개발)"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


class TransactionType(str, Enum):
    """거래 유형"""

    INCOME = "income"
    EXPENSE = "expense"
    TRANSFER = "transfer"


class CategoryType(str, Enum):
    """카테고리 유형 (이체는 카테고리 없음)"""

    INCOME = "income"
    EXPENSE = "expense"


class TransferRole(str, Enum):
    """이체 Leg 역할

    생성 시점에 각 Leg에 기록되어 방향 추론이 필요 없음.
    """

    SOURCE = "SOURCE"  # 출금 (잔액 감소)
    DESTINATION = "DESTINATION"  # 입금 (잔액 증가)
