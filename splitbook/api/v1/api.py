from fastapi import APIRouter
from splitbook.api.v1.endpoints import auth, users, expenses, balance

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(balance.router, prefix="/balance", tags=["balance"])
