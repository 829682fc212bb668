"""Authentication API endpoints"""

from datetime import datetime, timedelta
from typing import Optional
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from tavola.config import settings
from tavola.database import get_db
from tavola.errors import Conflict, Unauthorized
from tavola.models.user import User, UserRole
from tavola.repositories import UserRepository
from tavola.schemas.auth import Token, UserCreate, UserEnvelope
from tavola.schemas.reservation import ReservationListEnvelope
from tavola.services.reservations import ReservationManager

router = APIRouter()
logger = structlog.get_logger()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 schemes
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password"""
    return pwd_context.hash(password)


def create_access_token(user: User) -> str:
    """Create JWT access token"""
    expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user.id),
        "role": user.role.value,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


async def _user_from_token(token: str, db: AsyncSession) -> Optional[User]:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        user_id = payload.get("sub")
        if user_id is None or payload.get("type") != "access":
            return None
        user = await UserRepository(db).get(int(user_id))
    except (JWTError, ValueError):
        return None

    if user is None or not user.is_active:
        return None
    return user


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Get current authenticated user from token"""
    user = await _user_from_token(token, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """Current user when a valid bearer token is sent, otherwise None"""
    if not token:
        return None
    return await _user_from_token(token, db)


def require_role(required_role: UserRole):
    """Dependency factory for role-based access control"""
    async def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_permission(required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user
    return role_checker


@router.post("/register", response_model=UserEnvelope, status_code=201)
async def register(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a customer account"""
    users = UserRepository(db)

    if await users.get_by_username(user_data.username):
        raise Conflict("Username already taken", errors=[{"field": "username", "message": "Already taken"}])
    if await users.get_by_email(user_data.email):
        raise Conflict("Email already registered", errors=[{"field": "email", "message": "Already registered"}])

    user = await users.create(
        **user_data.model_dump(exclude={"password", "email"}),
        email=user_data.email.lower(),
        hashed_password=get_password_hash(user_data.password),
        role=UserRole.CUSTOMER,
        verification_token=uuid.uuid4().hex,
    )
    await db.commit()

    logger.info("User registered", user_id=user.id, username=user.username)
    return UserEnvelope(user=user)


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """Authenticate by username or email and return an access token"""
    users = UserRepository(db)
    user = await users.get_by_username(form_data.username)
    if user is None and "@" in form_data.username:
        user = await users.get_by_email(form_data.username)

    if not user or not verify_password(form_data.password, user.hashed_password):
        raise Unauthorized("Incorrect username or password")

    if not user.is_active:
        raise Unauthorized("User account is disabled")

    # Update last login
    user.last_login = datetime.utcnow()
    await db.commit()

    return Token(
        access_token=create_access_token(user),
        expires_in=settings.access_token_expire_minutes * 60,
    )


@router.get("/me", response_model=UserEnvelope)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Get current user information"""
    return UserEnvelope(user=current_user)


@router.get("/me/reservations", response_model=ReservationListEnvelope)
async def get_my_reservations(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Reservations booked while signed in, newest date first"""
    reservations = await ReservationManager(db).by_user(current_user.id)
    return ReservationListEnvelope(count=len(reservations), reservations=reservations)
