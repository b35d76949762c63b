"""Shared fixtures: in-memory SQLite DB, FastAPI TestClient, seeded admin & jenis surat."""

import os

# Harus di-set sebelum modul suratkeluar diimpor
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("KODE_INSTANSI", "071073/LPM")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from suratkeluar.dependencies import get_db
from suratkeluar.main import app
from suratkeluar.models import Base, JenisSurat, User
from suratkeluar.routers.auth import get_password_hash
from suratkeluar.schemas import SuratCreate
from suratkeluar.services.surat import create_surat

ADMIN_EMAIL = "admin@lpm.test"
STAF_EMAIL = "staf@lpm.test"
PASSWORD = "rahasia123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def jenis(db):
    db.add_all([
        JenisSurat(kode="001", nama_jenis="Surat Tugas"),
        JenisSurat(kode="002", nama_jenis="Surat Undangan"),
    ])
    db.commit()


@pytest.fixture
def make_surat(db, jenis):
    """Factory: simpan surat lewat service (nomor_lengkap dsb. diturunkan otomatis)."""
    def _make(nomor_urut, tanggal="2025-03-15", suffix="", jenis_surat="001",
              perihal="Rapat koordinasi", tujuan="Dekan FKIP", keterangan=None):
        payload = SuratCreate(
            nomor_urut=nomor_urut,
            suffix=suffix,
            jenis_surat=jenis_surat,
            tanggal_surat=tanggal,
            perihal=perihal,
            tujuan=tujuan,
            keterangan=keterangan,
        )
        return create_surat(db, payload)
    return _make


@pytest.fixture(scope="session")
def password_hash():
    return get_password_hash(PASSWORD)


@pytest.fixture
def users(db, password_hash):
    db.add_all([
        User(email=ADMIN_EMAIL, password_hash=password_hash, role="admin"),
        User(email=STAF_EMAIL, password_hash=password_hash, role="staf"),
    ])
    db.commit()


@pytest.fixture
def client(session_factory):
    """TestClient tanpa lifespan; get_db diarahkan ke DB test."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, email):
    resp = client.post("/auth/token", data={"username": email, "password": PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def auth_headers(client, users):
    return _login(client, ADMIN_EMAIL)


@pytest.fixture
def staf_headers(client, users):
    return _login(client, STAF_EMAIL)
