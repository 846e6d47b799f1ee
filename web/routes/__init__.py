"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- auth: 회원가입 / 로그인
- accounts: 계좌 (잔액 포함)
- categories: 카테고리
- transactions: 거래 / 이체
- budgets: 월별 예산
- analytics: 월별 집계
- dashboard: 대시보드 요약
"""
