# backend/utils/import_products.py
"""Bulk-load a product catalog from CSV.

Usage: python utils/import_products.py catalog.csv

Expected columns: name, category, size, color, cost_price, sale_price,
stock and optionally min_stock. Rows failing the catalog rules are
reported and skipped.
"""
import logging
import os
import sys
from typing import Dict, List

import pandas as pd

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from database import SessionLocal, init_db
from utils.catalog import create_product
from utils.errors import ValidationError
from utils.record_store import RecordStore

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["name", "category", "size", "color", "cost_price", "sale_price", "stock"]


def read_catalog(path: str) -> pd.DataFrame:
    df = pd.read_csv(path, dtype={"size": str})
    df.columns = [c.strip().lower() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(f"Missing columns: {', '.join(missing)}")
    if "min_stock" not in df.columns:
        df["min_stock"] = None
    # Blank numeric cells become 0 so validation reports them instead of NaN
    for col in ("cost_price", "sale_price"):
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0.0)
    df["stock"] = pd.to_numeric(df["stock"], errors="coerce").fillna(0).astype(int)
    df["min_stock"] = pd.to_numeric(df["min_stock"], errors="coerce")
    for col in ("name", "category", "size", "color"):
        df[col] = df[col].fillna("").astype(str)
    return df


def _row_fields(row) -> Dict:
    fields = {c: row[c] for c in REQUIRED_COLUMNS}
    fields["cost_price"] = float(fields["cost_price"])
    fields["sale_price"] = float(fields["sale_price"])
    fields["stock"] = int(fields["stock"])
    fields["min_stock"] = None if pd.isna(row["min_stock"]) else int(row["min_stock"])
    return fields


def import_catalog(store: RecordStore, df: pd.DataFrame) -> Dict[str, List]:
    result = {"created": [], "skipped": []}
    for idx, row in df.iterrows():
        try:
            product = create_product(store, _row_fields(row))
        except ValidationError as exc:
            logger.warning("Row %s skipped: %s", idx + 2, exc.message)
            result["skipped"].append({"row": idx + 2, "reason": exc.message})
            continue
        result["created"].append(product.code)
    return result


def main(argv=None):
    argv = argv if argv is not None else sys.argv[1:]
    if len(argv) != 1:
        print("Usage: python utils/import_products.py <catalog.csv>")
        return 2

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    init_db()
    db = SessionLocal()
    try:
        result = import_catalog(RecordStore(db), read_catalog(argv[0]))
    finally:
        db.close()

    print(f"✅ Imported {len(result['created'])} products, skipped {len(result['skipped'])}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
