"""
pytest 공통 fixture 정의

- secrets.yaml 임시 파일
- 스키마가 초기화된 임시 SQLite DB
- 기본 사용자/계좌/카테고리 시드
"""

import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.models import AccountRecord, CategoryRecord
from core.storage import AccountStore, CategoryStore
from tests.helpers import OTHER_OWNER_ID, OWNER_ID


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (development 모드)"""
    secrets_content = f"""# 테스트용 secrets.yaml
mode: development

web:
  secret_key: "test_jwt_secret_key_xyz"
  token_expire_minutes: 60

database:
  path: "{(temp_dir / 'ledger_test.db').as_posix()}"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_production(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (production 모드, DB 경로 미지정)"""
    secrets_content = """mode: production

web:
  secret_key: "prod_jwt_secret_key_xyz"
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 secrets.yaml 파일 생성"""
    secrets_content = """mode: testnet

web:
  secret_key: "jwt_secret"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> SQLiteAdapter:
    """스키마가 초기화된 임시 DB"""
    adapter = SQLiteAdapter(tmp_path / "ledger.db")
    await adapter.connect()
    await init_schema(adapter)
    # 외래 키 대상 사용자
    for user_id in (OWNER_ID, OTHER_OWNER_ID):
        await adapter.execute(
            "INSERT INTO users (user_id, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
            (user_id, f"{user_id}@example.com", "x", "2024-01-01T00:00:00.000000+00:00"),
        )
    await adapter.commit()
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def cash(db: SQLiteAdapter) -> AccountRecord:
    """Cash 계좌"""
    return await AccountStore(db).create(OWNER_ID, "Cash")


@pytest_asyncio.fixture
async def bank(db: SQLiteAdapter) -> AccountRecord:
    """Bank 계좌"""
    return await AccountStore(db).create(OWNER_ID, "Bank")


@pytest_asyncio.fixture
async def salary(db: SQLiteAdapter) -> CategoryRecord:
    """income 카테고리"""
    return await CategoryStore(db).create(OWNER_ID, "Salary", "income")


@pytest_asyncio.fixture
async def groceries(db: SQLiteAdapter) -> CategoryRecord:
    """expense 카테고리"""
    return await CategoryStore(db).create(OWNER_ID, "Groceries", "expense")
