from typing import List
from fastapi import APIRouter, HTTPException, Depends, status
from splitbook.api.v1.errors import http_error
from splitbook.core.auth import get_current_user
from splitbook.db.session import StoreDatabase, get_db
from splitbook.models.expense import Expense
from splitbook.models.user import User
from splitbook.repositories.user_repo import IdentityRegistry
from splitbook.schemas.expense import ExpenseCreate, ExpenseResponse, MyExpenseResponse, ShareResponse
from splitbook.utils.validation import SplitbookError

router = APIRouter()


def _to_expense_response(expense: Expense, registry: IdentityRegistry) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        description=expense.description,
        amount=expense.amount,
        split_method=expense.split_method,
        created_by=expense.created_by,
        created_at=expense.created_at,
        participants=[
            ShareResponse(
                user_id=p.user_id,
                name=registry.resolve_name(p.user_id),
                share=p.share
            )
            for p in expense.participants
        ]
    )


@router.post("/", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_in: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """
    Record an expense paid by the current user.

    - EQUAL: amount divided evenly
    - EXACT: shares are amounts, must add up to amount (±0.01)
    - PERCENTAGE: shares are percentages, must add up to 100 (±0.01)
    """
    try:
        expense = db.ledger.create_expense(
            expense_in.description,
            expense_in.amount,
            expense_in.split_method,
            expense_in.participant_ids,
            expense_in.shares,
            current_user.id
        )
    except SplitbookError as e:
        raise http_error(e)

    return _to_expense_response(expense, db.registry)


@router.get("/", response_model=List[ExpenseResponse])
async def list_expenses(
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """List all expenses in the order they were recorded"""
    return [_to_expense_response(e, db.registry) for e in db.ledger.all_expenses()]


@router.get("/mine", response_model=List[MyExpenseResponse])
async def list_my_expenses(
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """List expenses the current user paid for or takes part in"""
    return [
        MyExpenseResponse(
            **_to_expense_response(e, db.registry).model_dump(),
            your_share=e.share_of(current_user.id)
        )
        for e in db.ledger.expenses_involving(current_user.id)
    ]


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: StoreDatabase = Depends(get_db)
):
    """Get an expense by ID"""
    expense = db.ledger.get_expense(expense_id)
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found")
    return _to_expense_response(expense, db.registry)
