import re

import pytest

from utils.catalog import create_product, delete_product, generate_code, update_product
from utils.errors import NotFoundError, StoreError, ValidationError
from utils.inventory import create_purchase, create_sale


BASE = {
    "name": "Zapatilla Adidas Forum",
    "category": "Zapatillas",
    "size": "42",
    "color": "Blanco",
    "cost_price": 40.0,
    "sale_price": 70.0,
    "stock": 3,
}


def test_generate_code_format():
    assert re.fullmatch(r"PRD-[0-9A-F]{8}", generate_code())


def test_create_product_sets_code_margin_and_defaults(store):
    product = create_product(store, {**BASE, "name": "  Zapatilla Adidas Forum  "})

    assert product.code.startswith("PRD-")
    assert product.name == "Zapatilla Adidas Forum"
    assert product.margin_percent == pytest.approx(75.0)
    assert product.min_stock == 5


def test_codes_are_unique(store):
    first = create_product(store, BASE)
    second = create_product(store, BASE)
    assert first.code != second.code


@pytest.mark.parametrize("field", ["name", "category", "size", "color"])
def test_required_text_fields(store, field):
    with pytest.raises(ValidationError) as exc:
        create_product(store, {**BASE, field: "   "})
    assert exc.value.context["field"] == field


@pytest.mark.parametrize("cost,sale", [(0, 10), (10, 0), (10, 10), (10, 9.99), (-1, 5)])
def test_price_rules(store, cost, sale):
    with pytest.raises(ValidationError):
        create_product(store, {**BASE, "cost_price": cost, "sale_price": sale})


@pytest.mark.parametrize("price_field", ["cost_price", "sale_price"])
def test_database_rejects_zero_prices(store, price_field):
    fields = {**BASE, "code": generate_code(), price_field: 0}
    with pytest.raises(StoreError):
        store.create("product", fields)
    assert store.get_all("product") == []


def test_negative_stock_rejected(store):
    with pytest.raises(ValidationError):
        create_product(store, {**BASE, "stock": -1})


def test_update_recomputes_margin(store):
    product = create_product(store, BASE)
    updated = update_product(store, product.id, {"sale_price": 80.0})
    assert updated.margin_percent == pytest.approx(100.0)


def test_update_ignores_missing_fields(store):
    product = create_product(store, BASE)
    updated = update_product(store, product.id, {"color": None, "stock": 8})
    assert updated.color == "Blanco"
    assert updated.stock == 8


def test_update_cannot_price_below_cost(store):
    product = create_product(store, BASE)
    with pytest.raises(ValidationError):
        update_product(store, product.id, {"sale_price": 30.0})
    assert store.get_by_id("product", product.id).sale_price == 70.0


def test_update_unknown_product(store):
    with pytest.raises(NotFoundError):
        update_product(store, 123, {"stock": 1})


def test_delete_product_cascades_to_ledgers(store):
    product = create_product(store, BASE)
    create_sale(store, product.id, 1, 70.0)
    create_purchase(store, product.id, 2, 40.0)

    assert delete_product(store, product.id) == "Zapatilla Adidas Forum"
    assert store.get_by_id("product", product.id) is None
    assert store.get_all("sale") == []
    assert store.get_all("purchase") == []


def test_delete_unknown_product(store):
    with pytest.raises(NotFoundError):
        delete_product(store, 5)
