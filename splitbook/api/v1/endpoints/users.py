from typing import List
from fastapi import APIRouter, HTTPException, Depends
from splitbook.core.auth import get_current_user
from splitbook.db.session import StoreDatabase, get_db
from splitbook.models.user import User
from splitbook.schemas.user import UserResponse

router = APIRouter()

@router.get("/", response_model=List[UserResponse])
async def list_users(db: StoreDatabase = Depends(get_db)):
    """List every registered user"""
    return [UserResponse.model_validate(u) for u in db.registry.list_users()]

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """Get user by ID (requires authentication)"""
    user = db.registry.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user)
