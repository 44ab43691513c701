from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from app.models.expense import Expense
from app.services import activity_service


async def list_expenses() -> List[Expense]:
    return await Expense.all().order_by("-date", "-id")


async def get_expense(expense_id: int) -> Optional[Expense]:
    return await Expense.get_or_none(id=expense_id)


async def create_expense(data: Dict[str, Any], user_id: Optional[int] = None) -> Expense:
    async with in_transaction() as conn:
        expense = await Expense.create(**data, using_db=conn)
        await activity_service.record(
            type="expense",
            description=f"New expense of ${expense.amount:.2f} for {expense.category}",
            user_id=user_id,
            related_id=expense.id,
            related_type="expense",
            conn=conn,
        )
    return expense


async def update_expense(expense_id: int, data: Dict[str, Any]) -> Optional[Expense]:
    expense = await Expense.get_or_none(id=expense_id)
    if not expense:
        return None
    expense.update_from_dict(data)
    await expense.save()
    return expense


async def delete_expense(expense_id: int) -> bool:
    deleted = await Expense.filter(id=expense_id).delete()
    return deleted > 0
