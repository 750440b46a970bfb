from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Any, List, Optional


# One audit trail entry; meta holds ids, quantities and the failed step of partial writes
class LogEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    ts: Optional[datetime] = None
    user_id: Optional[int] = None
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    meta: Optional[Any] = None


class LogPage(BaseModel):
    items: List[LogEntry]
    total: int
    page: int
    page_size: int
