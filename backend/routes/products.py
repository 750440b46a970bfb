# backend/routes/products.py
from typing import Optional, List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session

from database import get_db
from models.product import Product
from models.users import User
from utils.audit import write_log, client_ip, actor_id
from utils.catalog import create_product, update_product, delete_product
from utils.derived import margin_percent
from utils.errors import NotFoundError
from utils.record_store import RecordStore, get_store
from utils.tokenJWT import get_optional_user
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


# ---- HELPERS ----
def _product_out(p: Product) -> product_schemas.ProductResponse:
    fields = list(product_schemas.ProductResponse.model_fields.keys())
    data = {f: getattr(p, f) for f in fields if hasattr(p, f)}
    # Never trust the stored snapshot
    data["margin_percent"] = margin_percent(p.cost_price, p.sale_price)
    data["low_stock"] = p.stock <= p.min_stock
    return product_schemas.ProductResponse.model_validate(data)


# =========================
# LIST / SEARCH
# =========================
@router.get("", response_model=product_schemas.ProductList)
def list_products(
    q: Optional[str] = Query(None, description="Busca en nombre, categoría y color"),
    category: Optional[str] = Query(None),
    size: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    filters = []
    if q:
        like = f"%{q}%"
        filters.append(or_(Product.name.ilike(like), Product.category.ilike(like), Product.color.ilike(like)))
    if category:
        filters.append(Product.category == category)
    if size:
        filters.append(Product.size == size)

    items = store.query("product", filters, order_by=["-created_at", "-id"])
    return {"items": [_product_out(p) for p in items], "total": len(items)}


@router.get("/low-stock", response_model=List[product_schemas.ProductResponse])
def low_stock_products(
    threshold: int = Query(5, ge=0, description="Stock <= threshold"),
    store: RecordStore = Depends(get_store),
):
    items = store.query("product", [Product.stock <= threshold], order_by=["stock", "name"])
    return [_product_out(p) for p in items]


@router.get("/unique/categories", response_model=List[str])
def product_categories(db: Session = Depends(get_db)):
    values = db.query(Product.category).distinct().filter(Product.category != None, Product.category != "").all()
    return sorted(v[0] for v in values)


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=product_schemas.ProductResponse)
def get_product(product_id: int, store: RecordStore = Depends(get_store)):
    product = store.get_by_id("product", product_id)
    if not product:
        raise NotFoundError("Producto no encontrado", product_id=product_id)
    return _product_out(product)


@router.post("", response_model=product_schemas.ProductResponse, status_code=201)
def add_product(
    payload: product_schemas.ProductCreate,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    product = create_product(store, payload.model_dump())
    write_log(
        store.db, user_id=actor_id(current_user), action="PRODUCT_CREATE", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": product.id, "code": product.code},
    )
    return _product_out(product)


@router.patch("/{product_id}", response_model=product_schemas.ProductResponse)
def edit_product(
    product_id: int,
    payload: product_schemas.ProductEditRequest,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    product = update_product(store, product_id, payload.model_dump(exclude_unset=True))
    write_log(
        store.db, user_id=actor_id(current_user), action="PRODUCT_EDIT", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": product.id},
    )
    return _product_out(product)


@router.delete("/{product_id}")
def remove_product(
    product_id: int,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    name = delete_product(store, product_id)
    write_log(
        store.db, user_id=actor_id(current_user), action="PRODUCT_DELETE", resource="products",
        status="SUCCESS", ip=client_ip(request), meta={"id": product_id},
    )
    return {"detail": f"Product '{name}' deleted"}
