# backend/routes/purchases.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from models.purchase import Purchase
from models.users import User
from schemas.purchase import PurchaseCreate, PurchaseList, PurchaseResponse, PurchaseStats
from schemas.sale import StatsPeriod
from utils.audit import write_log, client_ip, actor_id
from utils.derived import purchase_total
from utils.errors import StoreError
from utils.inventory import create_purchase, delete_purchase
from utils.record_store import RecordStore, get_store
from utils.reporting import period_start, purchase_stats
from utils.tokenJWT import get_optional_user

router = APIRouter(prefix="/purchases", tags=["Purchases"])


def _purchase_out(p: Purchase) -> PurchaseResponse:
    out = PurchaseResponse.model_validate(p)
    return out.model_copy(update={"total": purchase_total(p.quantity, p.unit_price)})


@router.get("", response_model=PurchaseList)
def list_purchases(
    date_from: Optional[datetime] = Query(None),
    date_to: Optional[datetime] = Query(None),
    supplier: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    filters = []
    if date_from:
        filters.append(Purchase.date >= date_from)
    if date_to:
        filters.append(Purchase.date <= date_to)
    if supplier:
        filters.append(Purchase.supplier.ilike(f"%{supplier}%"))
    items = store.query("purchase", filters, order_by=["-date", "-id"])
    return {"items": [_purchase_out(p) for p in items], "total": len(items)}


@router.get("/stats", response_model=PurchaseStats)
def get_purchase_stats(period: StatsPeriod = "month", store: RecordStore = Depends(get_store)):
    purchases = store.query("purchase", [Purchase.date >= period_start(period)])
    return {"period": period, **purchase_stats(purchases)}


@router.post("", response_model=PurchaseResponse, status_code=201)
def register_purchase(
    payload: PurchaseCreate,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    meta = {"product_id": payload.product_id, "quantity": payload.quantity}
    try:
        purchase = create_purchase(store, **payload.model_dump())
    except StoreError as exc:
        if exc.step != "record":
            write_log(
                store.db, user_id=actor_id(current_user), action="PURCHASE_CREATE", resource="purchases",
                status="FAIL", ip=client_ip(request), meta={**meta, "step": exc.step},
            )
        raise

    write_log(
        store.db, user_id=actor_id(current_user), action="PURCHASE_CREATE", resource="purchases",
        status="SUCCESS", ip=client_ip(request), meta={**meta, "id": purchase.id},
    )
    return _purchase_out(purchase)


@router.delete("/{purchase_id}")
def remove_purchase(
    purchase_id: int,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    try:
        delete_purchase(store, purchase_id)
    except StoreError as exc:
        if exc.step != "record":
            write_log(
                store.db, user_id=actor_id(current_user), action="PURCHASE_DELETE", resource="purchases",
                status="FAIL", ip=client_ip(request), meta={"id": purchase_id, "step": exc.step},
            )
        raise

    write_log(
        store.db, user_id=actor_id(current_user), action="PURCHASE_DELETE", resource="purchases",
        status="SUCCESS", ip=client_ip(request), meta={"id": purchase_id},
    )
    return {"detail": f"Purchase {purchase_id} deleted"}
