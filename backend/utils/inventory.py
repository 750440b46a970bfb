# backend/utils/inventory.py
"""Stock movements driven by the sales and purchases ledgers.

Every operation writes the ledger record first and only then adjusts the
product. The store commits each step separately: when a follow-up step
fails the record stays in place and the raised StoreError names the step
("stock_adjustment" or "cost_update") so it can be fixed by hand.
"""
import logging
from typing import Optional

from models.sale import PaymentMethod
from utils.derived import margin_percent, net_profit, purchase_total, sale_total
from utils.errors import InsufficientStock, NotFoundError, StoreError, ValidationError
from utils.record_store import RecordStore

logger = logging.getLogger(__name__)


def _get_product(store: RecordStore, product_id: int):
    product = store.get_by_id("product", product_id)
    if product is None:
        raise NotFoundError("Producto no encontrado", product_id=product_id)
    return product


def _check_quantity_and_price(quantity: int, unit_price: float) -> None:
    if quantity is None or quantity <= 0:
        raise ValidationError("La cantidad debe ser mayor a 0")
    if unit_price is None or unit_price <= 0:
        raise ValidationError("El precio debe ser mayor a 0")


def _log_partial(operation: str, record_id: int, exc: StoreError) -> None:
    logger.warning(
        "%s %s was recorded but step '%s' failed; stock needs manual review",
        operation, record_id, exc.step,
    )


def create_sale(
    store: RecordStore,
    product_id: int,
    quantity: int,
    unit_price: float,
    payment_method: PaymentMethod = PaymentMethod.EFECTIVO,
    commission_percent: float = 0,
    notes: Optional[str] = None,
):
    _check_quantity_and_price(quantity, unit_price)
    commission_percent = commission_percent or 0
    if not 0 <= commission_percent <= 100:
        raise ValidationError("La comisión debe estar entre 0 y 100")

    product = _get_product(store, product_id)
    if quantity > product.stock:
        raise InsufficientStock(product.id, product.stock, quantity)

    sale = store.create("sale", {
        "product_id": product.id,
        "quantity": quantity,
        "unit_price": unit_price,
        "payment_method": payment_method,
        "commission_percent": commission_percent,
        "total": sale_total(quantity, unit_price),
        "net_profit": net_profit(quantity, unit_price, commission_percent, product.cost_price),
        "notes": notes,
    }, step="record")

    try:
        store.update("product", product.id, {"stock": product.stock - quantity}, step="stock_adjustment")
    except StoreError as exc:
        _log_partial("Sale", sale.id, exc)
        raise

    logger.info("Sale %s: product %s stock -%s", sale.id, product.id, quantity)
    return sale


def delete_sale(store: RecordStore, sale_id: int) -> None:
    sale = store.get_by_id("sale", sale_id)
    if sale is None:
        raise NotFoundError("Venta no encontrada", sale_id=sale_id)
    product_id, quantity = sale.product_id, sale.quantity

    store.delete("sale", sale_id, step="record")

    product = store.get_by_id("product", product_id)
    if product is None:
        return
    try:
        store.update("product", product_id, {"stock": product.stock + quantity}, step="stock_adjustment")
    except StoreError as exc:
        _log_partial("Deleted sale", sale_id, exc)
        raise
    logger.info("Sale %s deleted: product %s stock +%s", sale_id, product_id, quantity)


def create_purchase(
    store: RecordStore,
    product_id: int,
    quantity: int,
    unit_price: float,
    supplier: Optional[str] = None,
    notes: Optional[str] = None,
):
    _check_quantity_and_price(quantity, unit_price)
    product = _get_product(store, product_id)

    purchase = store.create("purchase", {
        "product_id": product.id,
        "quantity": quantity,
        "unit_price": unit_price,
        "total": purchase_total(quantity, unit_price),
        "supplier": (supplier or "").strip() or None,
        "notes": notes,
    }, step="record")

    try:
        store.update("product", product.id, {"stock": product.stock + quantity}, step="stock_adjustment")
        # Last purchase price becomes the product's standard cost
        if product.cost_price != unit_price:
            store.update("product", product.id, {
                "cost_price": unit_price,
                "margin_percent": margin_percent(unit_price, product.sale_price),
            }, step="cost_update")
    except StoreError as exc:
        _log_partial("Purchase", purchase.id, exc)
        raise

    logger.info("Purchase %s: product %s stock +%s", purchase.id, product.id, quantity)
    return purchase


def delete_purchase(store: RecordStore, purchase_id: int) -> None:
    purchase = store.get_by_id("purchase", purchase_id)
    if purchase is None:
        raise NotFoundError("Compra no encontrada", purchase_id=purchase_id)
    product_id, quantity = purchase.product_id, purchase.quantity

    store.delete("purchase", purchase_id, step="record")

    product = store.get_by_id("product", product_id)
    if product is None:
        return
    # Units may already have been sold, so never go below zero
    new_stock = max(0, product.stock - quantity)
    try:
        store.update("product", product_id, {"stock": new_stock}, step="stock_adjustment")
    except StoreError as exc:
        _log_partial("Deleted purchase", purchase_id, exc)
        raise
    logger.info("Purchase %s deleted: product %s stock %s", purchase_id, product_id, new_stock)
