from fastapi import APIRouter, Depends

from nodeloom.schemas.api_schemas import LoginRequest, LoginResponse, RegisterRequest, UserEnvelope
from nodeloom.dependencies import get_user_service
from nodeloom.application.user_service import UserService

router = APIRouter()

@router.post("/register", response_model=UserEnvelope, status_code=201)
def register(
    user_data: RegisterRequest,
    users: UserService = Depends(get_user_service),
):
    """
    Register a new user account. The password is stored as a salted hash and never returned.
    """
    user = users.register(user_data.username, user_data.password, email=user_data.email)
    return {"user": user}

@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    users: UserService = Depends(get_user_service),
):
    """
    Exchange a username (or email) and password for a bearer token.
    """
    token = users.login(credentials.username, credentials.password)
    return LoginResponse(token=token)
