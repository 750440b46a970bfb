# backend/utils/catalog.py
import logging
import uuid
from typing import Any, Dict

from config import settings
from utils.derived import margin_percent
from utils.errors import NotFoundError, ValidationError
from utils.record_store import RecordStore

logger = logging.getLogger(__name__)

REQUIRED_TEXT = {
    "name": "El nombre es requerido",
    "category": "La categoría es requerida",
    "size": "El talle es requerido",
    "color": "El color es requerido",
}


def generate_code() -> str:
    return f"PRD-{uuid.uuid4().hex[:8].upper()}"


def _clean_text(fields: Dict[str, Any]) -> None:
    for key in REQUIRED_TEXT:
        if key in fields and fields[key] is not None:
            fields[key] = str(fields[key]).strip()


def _check_prices(cost_price, sale_price) -> None:
    if cost_price is None or cost_price <= 0:
        raise ValidationError("El precio de costo debe ser mayor a 0", field="cost_price")
    if sale_price is None or sale_price <= 0:
        raise ValidationError("El precio de venta debe ser mayor a 0", field="sale_price")
    if sale_price <= cost_price:
        raise ValidationError("El precio de venta debe ser mayor al precio de costo", field="sale_price")


def _check_stock(fields: Dict[str, Any]) -> None:
    if fields.get("stock") is not None and fields["stock"] < 0:
        raise ValidationError("El stock no puede ser negativo", field="stock")
    if fields.get("min_stock") is not None and fields["min_stock"] < 0:
        raise ValidationError("El stock mínimo no puede ser negativo", field="min_stock")


def validate_new_product(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Check a product form and return the cleaned field set."""
    fields = dict(fields)
    _clean_text(fields)
    for key, message in REQUIRED_TEXT.items():
        if not fields.get(key):
            raise ValidationError(message, field=key)
    _check_prices(fields.get("cost_price"), fields.get("sale_price"))
    fields.setdefault("stock", 0)
    if fields.get("min_stock") is None:
        fields["min_stock"] = settings.DEFAULT_MIN_STOCK
    _check_stock(fields)
    return fields


def create_product(store: RecordStore, fields: Dict[str, Any]):
    fields = validate_new_product(fields)
    fields["code"] = generate_code()
    fields["margin_percent"] = margin_percent(fields["cost_price"], fields["sale_price"])
    product = store.create("product", fields)
    logger.info("Product %s created (%s)", product.id, product.code)
    return product


def update_product(store: RecordStore, product_id: int, changes: Dict[str, Any]):
    product = store.get_by_id("product", product_id)
    if product is None:
        raise NotFoundError("Producto no encontrado", product_id=product_id)

    changes = {k: v for k, v in changes.items() if v is not None}
    _clean_text(changes)
    for key, message in REQUIRED_TEXT.items():
        if key in changes and not changes[key]:
            raise ValidationError(message, field=key)
    _check_stock(changes)

    if "cost_price" in changes or "sale_price" in changes:
        cost = changes.get("cost_price", product.cost_price)
        sale = changes.get("sale_price", product.sale_price)
        _check_prices(cost, sale)
        changes["margin_percent"] = margin_percent(cost, sale)

    if not changes:
        return product
    return store.update("product", product_id, changes)


def delete_product(store: RecordStore, product_id: int) -> str:
    product = store.get_by_id("product", product_id)
    if product is None:
        raise NotFoundError("Producto no encontrado", product_id=product_id)
    name = product.name
    store.delete("product", product_id)
    logger.info("Product %s deleted with its sales and purchases", product_id)
    return name
