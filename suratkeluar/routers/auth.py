# suratkeluar/routers/auth.py
import logging
from datetime import datetime, timedelta
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from passlib.context import CryptContext
from jose import JWTError, jwt
from pydantic import BaseModel

from suratkeluar.dependencies import get_db
from suratkeluar.models import User
from suratkeluar.config import settings
from suratkeluar.ratelimit import limiter

log = logging.getLogger(__name__)

# --- Auth Config ---
DEV_SECRET_KEY = "dev-secret-key-change-in-production-DO-NOT-USE"
SECRET_KEY = settings.SECRET_KEY or DEV_SECRET_KEY
if SECRET_KEY == DEV_SECRET_KEY:
    if settings.APP_ENV != "development":
        raise RuntimeError("FATAL: SECRET_KEY tidak ditemukan di .env. Konfigurasi .env terlebih dahulu!")
    log.warning("Using default SECRET_KEY! Set SECRET_KEY in .env for production!")

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

class Token(BaseModel):
    access_token: str
    token_type: str
    role: str
    email: str

class UserOut(BaseModel):
    id: int
    email: str
    role: str
    last_login: Optional[datetime] = None

    class Config:
        from_attributes = True

class AdminUserCreate(BaseModel):
    email: str
    password: str
    role: Optional[str] = "staf"

class ResetPasswordPayload(BaseModel):
    password: str

router = APIRouter(prefix="/auth", tags=["Auth"])

# --- Helpers ---
def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password):
    return pwd_context.hash(password)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=15)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Sesi tidak valid atau kedaluwarsa, silakan login ulang",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        email: str | None = payload.get("sub")
        if not email:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise credentials_exception
    return user

def require_admin(current_user: User = Depends(get_current_user)):
    if current_user.role != "admin":
        raise HTTPException(status_code=403, detail="Akses hanya untuk admin")
    return current_user

# --- Endpoints ---

@router.post("/token", response_model=Token)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
def login_for_access_token(request: Request, form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    # Field "username" pada form OAuth2 berisi email
    email = form_data.username.strip()
    if not email or not form_data.password:
        raise HTTPException(status_code=400, detail="Email dan password harus diisi")

    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(form_data.password, user.password_hash):
        log.warning("Login gagal untuk %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login gagal: email atau password salah",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user.last_login = datetime.utcnow()
    db.commit()

    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.email, "role": user.role}, expires_delta=access_token_expires
    )
    log.info("Login berhasil: %s", user.email)
    return {"access_token": access_token, "token_type": "bearer", "role": user.role, "email": user.email}

@router.get("/session", response_model=UserOut)
def get_session(current_user: User = Depends(get_current_user)):
    return current_user

@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    # Token JWT stateless: klien cukup membuang token
    log.info("Logout: %s", current_user.email)
    return {"detail": "Logout berhasil"}

@router.get("/users", response_model=List[UserOut])
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    return db.query(User).order_by(User.id.asc()).all()

@router.post("/users", response_model=UserOut)
def create_user(
    payload: AdminUserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if payload.role not in {"admin", "staf"}:
        raise HTTPException(status_code=400, detail="Role harus 'admin' atau 'staf'")

    existing = db.query(User).filter(User.email == payload.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email sudah terdaftar")

    hashed_password = get_password_hash(payload.password)
    new_user = User(email=payload.email, password_hash=hashed_password, role=payload.role)
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    return new_user

@router.delete("/users/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if current_user.id == user_id:
        raise HTTPException(status_code=400, detail="Tidak bisa menghapus akun sendiri")

    target = db.query(User).filter(User.id == user_id).first()
    if not target:
        raise HTTPException(status_code=404, detail="User tidak ditemukan")

    db.delete(target)
    db.commit()
    return {"detail": "User berhasil dihapus"}

@router.post("/users/{user_id}/reset-password")
def reset_password(
    user_id: int,
    payload: ResetPasswordPayload,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    target = db.query(User).filter(User.id == user_id).first()
    if not target:
        raise HTTPException(status_code=404, detail="User tidak ditemukan")

    target.password_hash = get_password_hash(payload.password)
    db.commit()
    return {"detail": "Password berhasil direset"}

# Helper to be called from main.py
def create_initial_admin(db: Session):
    if not settings.ADMIN_PASSWORD:
        log.warning("ADMIN_PASSWORD kosong, admin awal tidak dibuat")
        return

    existing = db.query(User).filter(User.email == settings.ADMIN_EMAIL).first()
    if not existing:
        hashed = get_password_hash(settings.ADMIN_PASSWORD)
        new_admin = User(email=settings.ADMIN_EMAIL, password_hash=hashed, role="admin")
        db.add(new_admin)
        db.commit()
        log.info("Admin awal dibuat: %s", settings.ADMIN_EMAIL)
