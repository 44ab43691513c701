import logging
from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from app.core.errors import ValidationFailure
from app.models.client import Client
from app.models.order import Order
from app.services import activity_service

log = logging.getLogger(__name__)


async def list_clients() -> List[Client]:
    return await Client.all().order_by("id")


async def get_client(client_id: int) -> Optional[Client]:
    return await Client.get_or_none(id=client_id)


async def create_client(data: Dict[str, Any], user_id: Optional[int] = None) -> Client:
    async with in_transaction() as conn:
        client = await Client.create(**data, using_db=conn)
        await activity_service.record(
            type="client",
            description=f"New client {client.name} registered",
            user_id=user_id,
            related_id=client.id,
            related_type="client",
            conn=conn,
        )
    return client


async def update_client(client_id: int, data: Dict[str, Any]) -> Optional[Client]:
    client = await Client.get_or_none(id=client_id)
    if not client:
        return None
    client.update_from_dict(data)
    await client.save()
    return client


async def delete_client(client_id: int) -> bool:
    async with in_transaction() as conn:
        client = await Client.get_or_none(id=client_id, using_db=conn)
        if not client:
            return False
        if await Order.filter(client_id=client_id).using_db(conn).exists():
            raise ValidationFailure(f"Client {client.name} has orders and cannot be deleted.")
        await client.delete(using_db=conn)

    log.info("Client %s deleted.", client_id)
    return True
