from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import current_user_id
from app.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from app.schemas.response import MessageData, SuccessResponse
from app.services import expense_service

router = APIRouter(dependencies=[Depends(current_user_id)])


def _out(expense):
    return ExpenseResponse.model_validate(expense).model_dump(mode="json")


@router.get("/", response_model=SuccessResponse)
async def list_expenses_endpoint():
    expenses = await expense_service.list_expenses()
    return SuccessResponse(data=[_out(e) for e in expenses])


@router.get("/{expense_id}", response_model=SuccessResponse)
async def get_expense_endpoint(expense_id: int):
    expense = await expense_service.get_expense(expense_id)
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
    return SuccessResponse(data=_out(expense))


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=SuccessResponse)
async def create_expense_endpoint(payload: ExpenseCreate, user_id: int = Depends(current_user_id)):
    expense = await expense_service.create_expense(payload.model_dump(), user_id=user_id)
    return SuccessResponse(data=_out(expense))


@router.put("/{expense_id}", response_model=SuccessResponse)
async def update_expense_endpoint(expense_id: int, payload: ExpenseUpdate):
    expense = await expense_service.update_expense(expense_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if not expense:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
    return SuccessResponse(data=_out(expense))


@router.delete("/{expense_id}", response_model=SuccessResponse)
async def delete_expense_endpoint(expense_id: int):
    if not await expense_service.delete_expense(expense_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")
    return SuccessResponse(data=MessageData(message="Expense deleted successfully").model_dump())
