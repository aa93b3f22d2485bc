# ============================================================================
# FILE: openmusic/api/v1/endpoints/users.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from datetime import timedelta
from openmusic.api.dependencies import get_user_service
from openmusic.config import settings
from openmusic.core.security import create_access_token
from openmusic.schemas.user import TokenResponse, UserCreate, UserCreatedResponse, UserLogin
from openmusic.services.user_service import UserService

router = APIRouter()

@router.post("/users", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """
    Register a new user account
    """
    user_id = await user_service.add_user(payload.username, payload.password, payload.fullname)
    return {
        "status": "success",
        "message": "User added",
        "data": {"userId": user_id},
    }

@router.post("/authentications", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def login(
    payload: UserLogin,
    user_service: UserService = Depends(get_user_service)
):
    """
    Login with username and password
    Returns JWT access token
    """
    user_id = await user_service.verify_user_credential(payload.username, payload.password)
    
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user_id}, expires_delta=access_token_expires
    )
    
    return {
        "status": "success",
        "data": {"accessToken": access_token, "tokenType": "bearer"},
    }
