# suratkeluar/main.py
"""
Surat Keluar LPM - FastAPI main entry.

Features:
- Lifespan startup: ensure dirs, init DB, seed admin
- CORS for dev
- Root/health endpoint
- Include routers: auth, surat, nomor, jenis-surat, tujuan, dashboard, export
"""

from contextlib import asynccontextmanager
import logging
import json

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from suratkeluar.config import settings, ensure_dirs
from suratkeluar.database import init_db
from suratkeluar.ratelimit import limiter
from suratkeluar.services.nomor_surat import NomorSuratError
from suratkeluar.routers import auth, surat, nomor, jenis_surat, tujuan, dashboard, export

# ----- Logging (gunakan logger uvicorn agar nyatu di console) -----
log = logging.getLogger("uvicorn")

logging.basicConfig(level=settings.LOG_LEVEL)
for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    logging.getLogger(logger_name).setLevel(settings.LOG_LEVEL)

# ----- Tags metadata utk Swagger UI -----
tags_metadata = [
    {"name": "Root", "description": "Status aplikasi & health check."},
    {"name": "Auth", "description": "Login, sesi, logout & manajemen akun admin."},
    {"name": "Surat", "description": "CRUD surat keluar dengan filter & paginasi."},
    {"name": "Nomor", "description": "Saran nomor berikutnya, gap, cek duplikasi & pratinjau nomor lengkap."},
    {"name": "Jenis Surat", "description": "Registri kode jenis surat."},
    {"name": "Tujuan", "description": "Autocomplete tujuan surat."},
    {"name": "Dashboard", "description": "Statistik & data grafik."},
    {"name": "Export", "description": "Ekspor surat ke CSV."},
]

# ----- Lifespan (startup/shutdown) -----
@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        ensure_dirs()
        init_db()

        # Seed Admin
        from suratkeluar.database import SessionLocal
        from suratkeluar.routers.auth import create_initial_admin
        db = SessionLocal()
        try:
            create_initial_admin(db)
        finally:
            db.close()

        log.info("[startup] DB: %s | KODE_INSTANSI: %s", settings.DB_FILE, settings.KODE_INSTANSI)
    except Exception as e:
        log.error("Startup failed: %s", e, exc_info=True)
        raise

    yield

    log.info("[shutdown] %s stopped.", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    description=(
        "Pencatatan surat keluar: penomoran berurutan per tahun, pencegahan nomor ganda, "
        "deteksi gap, autocomplete tujuan, statistik dashboard & ekspor CSV."
    ),
    version=settings.APP_VERSION,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# ----- CORS -----
default_dev_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",  # Vite dev server default
    "http://127.0.0.1:5173",
]

def parse_cors_origins(raw_value: str) -> list[str]:
    if not raw_value:
        return []
    raw_value = raw_value.strip()
    if raw_value.startswith("["):
        try:
            parsed = json.loads(raw_value)
        except json.JSONDecodeError:
            log.warning("CORS_ORIGINS bukan JSON valid: %s", raw_value)
            return []
        return [str(o).strip() for o in parsed if str(o).strip()]
    return [o.strip() for o in raw_value.split(",") if o.strip()]

cors_origins = parse_cors_origins(settings.CORS_ORIGINS)

if not cors_origins and settings.APP_ENV == "development":
    cors_origins = default_dev_origins

if settings.APP_ENV == "development" and settings.APP_DEBUG:
    log.warning("CORS: Allowing ALL origins (development debug)")
    cors_origins = ["*"]

if settings.APP_ENV != "development" and not cors_origins:
    log.warning("CORS_ORIGINS is empty in production. Requests from browsers may be blocked.")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

# ----- Rate Limiting (slowapi) -----
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, lambda request, exc: JSONResponse(
    status_code=429,
    content={"detail": "Terlalu banyak percobaan. Coba lagi nanti."},
))

# ----- Validasi nomor surat (nomor urut, tanggal, bulan) -> 400 -----
@app.exception_handler(NomorSuratError)
async def nomor_surat_error_handler(request: Request, exc: NomorSuratError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    log.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Terjadi kesalahan database"})

# ----- Root & Health -----
@app.get("/", tags=["Root"])
def root():
    return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "ok"}

@app.get("/healthz", tags=["Root"])
def healthz():
    return {"status": "healthy"}

# ----- Include Routers -----
app.include_router(auth.router)
app.include_router(surat.router)
app.include_router(nomor.router)
app.include_router(jenis_surat.router)
app.include_router(tujuan.router)
app.include_router(dashboard.router)
app.include_router(export.router)

# ----- Catatan untuk menjalankan uvicorn -----
# python -m uvicorn suratkeluar.main:app --reload
