from fastapi import APIRouter, Depends
from fastapi.responses import Response
from splitbook.core.auth import get_current_user
from splitbook.db.session import StoreDatabase, get_db
from splitbook.models.user import User
from splitbook.schemas.balance import BalanceResponse, RawBalanceResponse
from splitbook.services.balance_service import BalanceService
from splitbook.services.export_service import ExportService

router = APIRouter()

@router.get("/", response_model=BalanceResponse)
async def get_my_balance(
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """Who owes the current user and whom the current user owes"""
    balance = BalanceService.compute_balance(db.ledger, current_user.id)
    entries = BalanceService.summarize(balance, db.registry)
    return BalanceResponse(user_id=current_user.id, entries=entries, settled=not entries)

@router.get("/raw", response_model=RawBalanceResponse)
async def get_my_raw_balance(
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """Unfiltered balance map, near-zero entries included"""
    balance = BalanceService.compute_balance(db.ledger, current_user.id)
    return RawBalanceResponse(user_id=current_user.id, balance=balance)

@router.get("/export")
async def export_balance(
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """Download the current user's balance sheet as CSV"""
    content = ExportService.to_csv(db.ledger, db.registry, current_user.id)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="balance_{current_user.id}.csv"'}
    )
