from fastapi import APIRouter, Depends, Request, Response
from ..schemas import AuthResponse, LoginRequest, SignupRequest, UserOut
from ..services.auth_service import AuthService
from ..core.config import settings
from ..core.security import TOKEN_COOKIE, require_user, rate_limit

router = APIRouter(prefix="/auth")

def service_dep(request: Request) -> AuthService:
    return request.app.state.auth_service

def _set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        httponly=True,
        secure=settings.cookie_secure,
        max_age=settings.TOKEN_TTL_SECONDS,
    )

@router.post("/signup", response_model=AuthResponse, status_code=201)
def signup(
    body: SignupRequest,
    response: Response,
    _lim = Depends(rate_limit),
    svc: AuthService = Depends(service_dep),
):
    user, token = svc.signup(body.name, body.email, body.password)
    _set_token_cookie(response, token)
    return AuthResponse(message="User registered successfully", user=UserOut.from_record(user))

@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    _lim = Depends(rate_limit),
    svc: AuthService = Depends(service_dep),
):
    user, token = svc.login(body.email, body.password)
    _set_token_cookie(response, token)
    return AuthResponse(message="Login successful", user=UserOut.from_record(user))

@router.post("/logout")
def logout(response: Response, _lim = Depends(rate_limit)):
    response.delete_cookie(TOKEN_COOKIE)
    return {"message": "Logged out successfully"}

@router.get("/me", response_model=AuthResponse)
def me(
    claims: dict = Depends(require_user),
    _lim = Depends(rate_limit),
    svc: AuthService = Depends(service_dep),
):
    return AuthResponse(user=UserOut.from_record(svc.get_user(claims["id"])))
