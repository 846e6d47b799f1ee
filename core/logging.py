"""
로깅 설정

- 콘솔 + <process>.log: 전체 로그 (매일 자정 롤링)
- ledger.log: core.ledger 로그만 별도 기록 (이체 생성/실패, 이체 이상 데이터)

사용법:
    from core.logging import setup_logging
    setup_logging("web")
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

# 원장 감사 로그 대상 로거
LEDGER_LOGGER = "core.ledger"
LEDGER_LOG_FILE = "ledger.log"

# WARNING 이상만 남길 라이브러리 로거
NOISY_LOGGERS = [
    "aiosqlite",
    "httpcore",
    "httpx",
    "asyncio",
    "multipart",
]


def get_log_dir(process_name: str) -> Path:
    """프로세스별 로그 디렉토리"""
    if process_name == "web":
        return Paths.WEB_LOGS_DIR
    return Paths.LOGS_DIR


def _daily_file_handler(path: Path, level: int, formatter: logging.Formatter) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"  # ledger.log.2026-10-19
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    level: int | str = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 + 원장 감사 로거 설정

    여러 번 호출해도 핸들러가 중복되지 않음.

    Args:
        process_name: 프로세스 이름 (로그 파일명)
        level: 콘솔/파일 로그 레벨 (int 또는 "INFO" 같은 이름)
        log_dir: 로그 디렉토리 (None이면 프로세스별 기본 경로)

    Returns:
        루트 Logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    log_dir = log_dir or get_log_dir(process_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    main_file = log_dir / f"{process_name}.log"
    root_logger.addHandler(_daily_file_handler(main_file, level, formatter))

    # 원장 로그는 루트로도 전파 (콘솔/메인 파일에도 남음)
    ledger_logger = logging.getLogger(LEDGER_LOGGER)
    ledger_logger.handlers.clear()
    ledger_logger.addHandler(
        _daily_file_handler(log_dir / LEDGER_LOG_FILE, logging.INFO, formatter)
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(f"Logging ready: {process_name} -> {main_file}")
    return root_logger
