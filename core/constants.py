"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from decimal import Decimal
from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → pocketledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # JWT 만료 시간 (분, 기본 1일)
    TOKEN_EXPIRE_MINUTES: int = 1440
    TOKEN_ALGORITHM: str = "HS256"

    # 대시보드 최근 거래 개수
    RECENT_TRANSACTION_COUNT: int = 5


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # DB 파일
    PROD_DB: Path = DATA_DIR / "pocketledger_prod.db"
    DEV_DB: Path = DATA_DIR / "pocketledger_dev.db"


class Limits:
    """입력 검증 한계값"""

    # 금액 소수점 자리수 (센트 단위)
    AMOUNT_DECIMALS: int = 2
    AMOUNT_QUANT: Decimal = Decimal("0.01")
    # 단건 금액 상한 (합계가 Decimal 기본 정밀도 28자리 안에 머물도록)
    MAX_AMOUNT: Decimal = Decimal("999999999999.99")

    # 예산/분석 기간
    MIN_YEAR: int = 2000
    MAX_YEAR: int = 2100

    # 회원가입
    MIN_PASSWORD_LENGTH: int = 6
    # bcrypt 입력 한계
    MAX_PASSWORD_BYTES: int = 72
