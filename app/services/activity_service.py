import logging
from typing import Any, List, Optional

from app.core.config import ACTIVITY_FEED_LIMIT
from app.models.activity import Activity

log = logging.getLogger(__name__)


async def record(
    type: str,
    description: str,
    user_id: Optional[int] = None,
    related_id: Optional[int] = None,
    related_type: Optional[str] = None,
    conn: Any = None,
) -> Activity:
    """
    Appends an entry to the activity log, stamped with the current time.

    Passing 'conn' writes the entry in the caller's transaction so it commits
    (or rolls back) together with the change it describes.
    """
    activity = await Activity.create(
        type=type,
        description=description,
        user_id=user_id,
        related_id=related_id,
        related_type=related_type,
        using_db=conn,
    )
    log.debug("Activity %s recorded: %s", activity.id, description)
    return activity


async def recent(limit: Optional[int] = ACTIVITY_FEED_LIMIT) -> List[Activity]:
    """Newest entries first. A falsy limit returns the whole log."""
    query = Activity.all().order_by("-timestamp", "-id")
    if limit:
        query = query.limit(limit)
    return await query
