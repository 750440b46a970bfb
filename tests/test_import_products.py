import pytest

from utils.errors import ValidationError
from utils.import_products import import_catalog, read_catalog

CSV = """name,category,size,color,cost_price,sale_price,stock,min_stock
Remera Oversize,Remeras,L,Blanco,8,14,12,3
Jean Mom,Jeans,38,Azul,20,18,4,
Buzo Canguro,Buzos,XL,Gris,15,27,,
,Gorras,U,Negro,5,9,2,1
"""


def test_import_creates_valid_rows_and_reports_the_rest(tmp_path, store):
    path = tmp_path / "catalog.csv"
    path.write_text(CSV, encoding="utf-8")

    result = import_catalog(store, read_catalog(str(path)))

    assert len(result["created"]) == 2
    assert [s["row"] for s in result["skipped"]] == [3, 5]

    products = {p.name: p for p in store.get_all("product")}
    assert products["Remera Oversize"].min_stock == 3
    assert products["Buzo Canguro"].stock == 0
    assert products["Buzo Canguro"].min_stock == 5


def test_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,category\nRemera,Remeras\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        read_catalog(str(path))
