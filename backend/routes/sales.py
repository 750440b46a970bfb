# backend/routes/sales.py
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from models.sale import PaymentMethod, Sale
from models.users import User
from schemas.sale import SaleCreate, SaleList, SaleResponse, SalesStats, PaymentMethodOption, StatsPeriod
from utils.audit import write_log, client_ip, actor_id
from utils.derived import net_profit, sale_total
from utils.errors import StoreError
from utils.inventory import create_sale, delete_sale
from utils.record_store import RecordStore, get_store
from utils.reporting import period_start, sales_stats
from utils.tokenJWT import get_optional_user

router = APIRouter(prefix="/sales", tags=["Sales"])

PAYMENT_LABELS = {
    PaymentMethod.EFECTIVO: "Efectivo",
    PaymentMethod.TARJETA_DEBITO: "Tarjeta de Débito",
    PaymentMethod.TARJETA_CREDITO: "Tarjeta de Crédito",
    PaymentMethod.TRANSFERENCIA: "Transferencia",
    PaymentMethod.MERCADOPAGO: "MercadoPago",
    PaymentMethod.OTRO: "Otro",
}


def _log_failure(store: RecordStore, request: Request, user: Optional[User], action: str, exc: StoreError, meta: dict):
    # Partial writes must be visible in the audit trail
    write_log(
        store.db, user_id=actor_id(user), action=action, resource="sales", status="FAIL",
        ip=client_ip(request), meta={**meta, "step": exc.step},
    )


# Stored totals are snapshots; responses are rebuilt from quantity, price and product cost
def _sale_out(s: Sale) -> SaleResponse:
    out = SaleResponse.model_validate(s)
    return out.model_copy(update={
        "total": sale_total(s.quantity, s.unit_price),
        "net_profit": net_profit(s.quantity, s.unit_price, s.commission_percent, s.product.cost_price),
    })


@router.get("", response_model=SaleList)
def list_sales(
    date_from: Optional[datetime] = Query(None),
    date_to: Optional[datetime] = Query(None),
    store: RecordStore = Depends(get_store),
):
    filters = []
    if date_from:
        filters.append(Sale.date >= date_from)
    if date_to:
        filters.append(Sale.date <= date_to)
    items = store.query("sale", filters, order_by=["-date", "-id"])
    return {"items": [_sale_out(s) for s in items], "total": len(items)}


@router.get("/stats", response_model=SalesStats)
def get_sales_stats(period: StatsPeriod = "month", store: RecordStore = Depends(get_store)):
    sales = store.query("sale", [Sale.date >= period_start(period)])
    return {"period": period, **sales_stats(sales)}


@router.get("/payment-methods", response_model=List[PaymentMethodOption])
def payment_methods():
    return [{"value": m.value, "label": label} for m, label in PAYMENT_LABELS.items()]


@router.post("", response_model=SaleResponse, status_code=201)
def register_sale(
    payload: SaleCreate,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    meta = {"product_id": payload.product_id, "quantity": payload.quantity}
    try:
        sale = create_sale(store, **payload.model_dump())
    except StoreError as exc:
        if exc.step != "record":
            _log_failure(store, request, current_user, "SALE_CREATE", exc, meta)
        raise

    write_log(
        store.db, user_id=actor_id(current_user), action="SALE_CREATE", resource="sales",
        status="SUCCESS", ip=client_ip(request), meta={**meta, "id": sale.id},
    )
    return _sale_out(sale)


@router.delete("/{sale_id}")
def remove_sale(
    sale_id: int,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    try:
        delete_sale(store, sale_id)
    except StoreError as exc:
        if exc.step != "record":
            _log_failure(store, request, current_user, "SALE_DELETE", exc, {"id": sale_id})
        raise

    write_log(
        store.db, user_id=actor_id(current_user), action="SALE_DELETE", resource="sales",
        status="SUCCESS", ip=client_ip(request), meta={"id": sale_id},
    )
    return {"detail": f"Sale {sale_id} deleted, stock restored"}
