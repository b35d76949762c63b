# suratkeluar/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from suratkeluar.config import settings, DB_FILE, ensure_dirs


def get_database_url():
    # DATABASE_URL menang; lalu MySQL jika MYSQL_USE=1; selain itu SQLite lokal
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    if settings.MYSQL_USE:
        if not settings.MYSQL_URL:
            raise RuntimeError("MYSQL_USE=1 tetapi MYSQL_URL kosong")
        return settings.MYSQL_URL
    ensure_dirs()
    return f"sqlite:///{DB_FILE.as_posix()}"

SQLALCHEMY_DATABASE_URL = get_database_url()

if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
    )
else:
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db():
    # LAZY IMPORT -> hindari circular import
    from suratkeluar.models import Base
    Base.metadata.create_all(bind=engine)
