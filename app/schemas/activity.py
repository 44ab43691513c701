from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    description: str
    timestamp: datetime
    user_id: Optional[int] = None
    related_id: Optional[int] = None
    related_type: Optional[str] = None
