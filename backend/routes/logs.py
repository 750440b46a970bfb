from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.log import Log
from models.users import User
from schemas.log import LogPage
from utils.errors import AuthorizationError
from utils.tokenJWT import get_current_user, is_admin

router = APIRouter(prefix="/logs", tags=["Logs"])


@router.get("", response_model=LogPage)
def list_audit_entries(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    action: Optional[str] = Query(None, description="PRODUCT_CREATE, SALE_DELETE..."),
    resource: Optional[str] = Query(None, description="products, sales, purchases, sellers, auth"),
    status: Optional[str] = Query(None, description="SUCCESS / FAIL"),
    user_id: Optional[int] = Query(None),
    date_from: Optional[datetime] = Query(None),
    date_to: Optional[datetime] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not is_admin(current_user):
        raise AuthorizationError("Solo un administrador puede ver los logs")

    filters = []
    if action:
        filters.append(Log.action.ilike(f"%{action}%"))
    if resource:
        filters.append(Log.resource == resource)
    if status:
        filters.append(Log.status == status.upper())
    if user_id is not None:
        filters.append(Log.user_id == user_id)
    if date_from:
        filters.append(Log.ts >= date_from)
    if date_to:
        filters.append(Log.ts <= date_to)

    query = db.query(Log).filter(*filters)
    total = query.count()
    entries = (
        query.order_by(Log.ts.desc(), Log.id.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return {"items": entries, "total": total, "page": page, "page_size": page_size}
