# backend/routes/dashboard.py
from fastapi import APIRouter, Depends

from schemas.dashboard import InventorySummary, CategoryStockResponse
from utils.record_store import RecordStore, get_store
from utils.reporting import inventory_summary, category_stock

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"]
)


# === Inventory summary ===

@router.get("/summary", response_model=InventorySummary)
def get_inventory_summary(store: RecordStore = Depends(get_store)):
    return inventory_summary(store.get_all("product"))


# === Stock per category ===

@router.get("/categories", response_model=CategoryStockResponse)
def get_category_stock(store: RecordStore = Depends(get_store)):
    return {"data": category_stock(store.get_all("product"))}
