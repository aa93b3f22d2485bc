# ============================================================================
# FILE: openmusic/schemas/user.py
# ============================================================================
from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    fullname: str = Field(..., min_length=1)

class UserLogin(BaseModel):
    """Schema for user login"""
    username: str
    password: str

class UserIdData(BaseModel):
    userId: str

class UserCreatedResponse(BaseModel):
    status: str
    message: str
    data: UserIdData

class TokenData(BaseModel):
    accessToken: str
    tokenType: str

class TokenResponse(BaseModel):
    """Schema for login response"""
    status: str
    data: TokenData
