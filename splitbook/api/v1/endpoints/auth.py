import logging
from fastapi import APIRouter, status, Depends
from splitbook.api.v1.errors import http_error
from splitbook.core.auth import create_access_token, get_current_user
from splitbook.db.session import StoreDatabase, get_db
from splitbook.models.user import User
from splitbook.schemas.auth import UserSignup, UserLogin, TokenResponse
from splitbook.schemas.user import UserResponse
from splitbook.utils.validation import SplitbookError

logger = logging.getLogger(__name__)

router = APIRouter()


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id),
        token_type="bearer",
        user=UserResponse.model_validate(user)
    )


@router.post("/signup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def signup(user_data: UserSignup, db: StoreDatabase = Depends(get_db)):
    """Register a new user"""
    try:
        user = db.registry.register(
            user_data.name,
            user_data.email,
            user_data.phone,
            user_data.password
        )
    except SplitbookError as e:
        raise http_error(e)

    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(credentials: UserLogin, db: StoreDatabase = Depends(get_db)):
    """Login with email and password"""
    try:
        user = db.registry.authenticate(credentials.email, credentials.password)
    except SplitbookError as e:
        logger.info("Failed login for %s", credentials.email)
        raise http_error(e)

    logger.info("User %d logged in", user.id)
    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user information"""
    return UserResponse.model_validate(current_user)


@router.post("/logout")
async def logout(current_user: User = Depends(get_current_user)):
    """Logout (client should delete token)"""
    # Tokens are stateless; nothing is kept server side
    return {"message": "Logged out successfully"}
