"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.account_service import AccountService
from web.services.analytics_service import AnalyticsService
from web.services.auth_service import AuthService
from web.services.budget_service import BudgetService
from web.services.category_service import CategoryService
from web.services.dashboard_service import DashboardService
from web.services.transaction_service import TransactionService

__all__ = [
    "AccountService",
    "AnalyticsService",
    "AuthService",
    "BudgetService",
    "CategoryService",
    "DashboardService",
    "TransactionService",
]
