import os
import tempfile
from datetime import datetime

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_realestate.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["DEMO_OWNER_LOOKUP"] = "true"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from realestate.main import app
from realestate.core.security import create_access_token, get_password_hash
from realestate.db.models.user import User as UserModel
from realestate.domain.statuses import ACTIVE, PROPERTY_AVAILABLE, UNIT_RENTED

# Above 2**53: survives only if ids travel as strings
BIG_OWNER_ID = 9007199254740993


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from realestate.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


def _create_user(db: Session, **overrides) -> UserModel:
    fields = {
        "email": "owner@example.com",
        "first_name": "سارة",
        "last_name": "العتيبي",
        "phone_number": "0500000001",
        "national_id": "1000000001",
        "user_type": "owner",
        "password_hash": get_password_hash("OwnerPass123"),
    }
    fields.update(overrides)
    user = UserModel(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def owner_user(db: Session) -> dict:
    """Create a property owner for testing."""
    user = _create_user(db)
    return {
        "id": user.id,
        "email": user.email,
        "password": "OwnerPass123",
        "phone": user.phone_number,
        "national_id": user.national_id,
    }


@pytest.fixture(scope="function")
def big_owner_user(db: Session) -> dict:
    """Create an owner whose id does not fit in a double."""
    user = _create_user(
        db,
        id=BIG_OWNER_ID,
        email="big.owner@example.com",
        phone_number="0500000099",
        national_id="1000000099",
    )
    return {"id": user.id, "email": user.email}


@pytest.fixture(scope="function")
def tenant_user(db: Session) -> dict:
    """Create a tenant user for testing."""
    user = _create_user(
        db,
        email="tenant@example.com",
        first_name="خالد",
        last_name="الشهري",
        phone_number="0500000002",
        national_id="1000000002",
        user_type="tenant",
        password_hash=get_password_hash("TenantPass123"),
    )
    return {
        "id": user.id,
        "email": user.email,
        "password": "TenantPass123",
    }


@pytest.fixture(scope="function")
def owner_token(owner_user: dict) -> str:
    """Get JWT token for the owner user."""
    return create_access_token(data={"sub": owner_user["id"]})


@pytest.fixture(scope="function")
def property_record(db: Session, owner_user: dict):
    """Create a property owned by ``owner_user``."""
    from realestate.repositories.property import create_property

    return create_property(
        db,
        owner_id=owner_user["id"],
        name="برج النخيل",
        type="عمارة",
        address="شارع الملك فهد",
        city="الرياض",
        neighborhood="العليا",
        rooms="4",
        status=PROPERTY_AVAILABLE,
    )


@pytest.fixture(scope="function")
def unit_record(db: Session, property_record):
    """Create a rented unit in ``property_record``."""
    from realestate.db.models.unit import Unit as UnitModel

    unit = UnitModel(property_id=property_record.id, unit_number="A1", status=UNIT_RENTED)
    db.add(unit)
    db.commit()
    db.refresh(unit)
    return unit


@pytest.fixture(scope="function")
def contract_record(db: Session, owner_user: dict, property_record, unit_record):
    """Create an active contract on ``unit_record``."""
    from realestate.repositories.contract import create_contract

    return create_contract(
        db,
        property_id=property_record.id,
        unit_id=unit_record.id,
        owner_id=owner_user["id"],
        tenant_name="خالد الشهري",
        tenant_phone="0500000002",
        type="سكني",
        start_date=datetime(2025, 1, 1),
        end_date=datetime(2025, 12, 31),
        monthly_rent=3500.0,
        status=ACTIVE,
    )
