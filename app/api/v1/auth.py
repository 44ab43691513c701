import logging
from fastapi import APIRouter, HTTPException, Request, status

from app.api.deps import SESSION_USER_KEY
from app.core.security import hash_password, verify_password
from app.schemas.auth import LoginRequest, RegisterRequest, UserResponse
from app.schemas.response import MessageData, SuccessResponse
from app.services import user_service

log = logging.getLogger("uvicorn")

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def register(payload: RegisterRequest):
    """Creates a regular user account. Duplicate usernames are rejected with 400."""
    user = await user_service.create_user({
        "username": payload.username,
        "password": hash_password(payload.password),
        "name": payload.name,
        "email": payload.email,
        "role": "user",
    })
    log.info(f"User {user.username} registered.")
    return SuccessResponse(data=UserResponse.model_validate(user).model_dump(mode="json"))


@router.post("/login", response_model=SuccessResponse)
async def login(payload: LoginRequest, request: Request):
    user = await user_service.get_user_by_username(payload.username)
    if not user or not verify_password(payload.password, user.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    request.session[SESSION_USER_KEY] = user.id
    log.info(f"User {user.username} logged in.")
    return SuccessResponse(data=UserResponse.model_validate(user).model_dump(mode="json"))


@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request):
    request.session.clear()
    return SuccessResponse(data=MessageData(message="Logged out successfully").model_dump(mode="json"))


@router.get("/me", response_model=SuccessResponse)
async def me(request: Request):
    """Returns the logged-in user, without the password hash."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")

    user = await user_service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return SuccessResponse(data=UserResponse.model_validate(user).model_dump(mode="json"))
