"""FastAPI endpoints for registration and login."""

from fastapi import APIRouter, Depends

from storefront.api.concurrency import run_in_domain_thread
from storefront.api.dependencies import get_hasher, get_tokens
from storefront.api.identity.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserSchema,
)
from storefront.user.authentication import login
from storefront.user.passwords import PasswordHasher
from storefront.user.registration import register
from storefront.user.tokens import TokenService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=RegisterResponse)
async def register_user(body: RegisterRequest, hasher: PasswordHasher = Depends(get_hasher)) -> RegisterResponse:
    user_id = await run_in_domain_thread(
        register, name=body.name, email=body.email, raw_password=body.password, hasher=hasher
    )
    return RegisterResponse(user_id=user_id)


@router.post("/login", response_model=LoginResponse)
async def login_user(
    body: LoginRequest,
    hasher: PasswordHasher = Depends(get_hasher),
    tokens: TokenService = Depends(get_tokens),
) -> LoginResponse:
    result = await run_in_domain_thread(login, body.email, body.password, hasher=hasher, tokens=tokens)
    return LoginResponse(token=result.token, user=UserSchema.from_user(result.user))
