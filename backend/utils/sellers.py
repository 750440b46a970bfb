# backend/utils/sellers.py
import logging
from typing import List

from sqlalchemy import or_

from models.seller import Seller, SellerLink
from models.users import User
from schemas.seller import SellerPayload
from utils.errors import AuthorizationError, NotFoundError
from utils.record_store import RecordStore
from utils.tokenJWT import is_admin

logger = logging.getLogger(__name__)

# Suggested specialties shown in the seller form; any other text is accepted
SPECIALTIES = [
    "Zapatillas", "Remeras", "Jeans", "Buzos", "Camperas", "Vestidos",
    "Shorts", "Accesorios", "Bolsos", "Relojes", "Lentes", "Gorras",
    "Medias", "Ropa Interior", "Deportiva", "Formal", "Casual", "Infantil",
]


def _require_admin(user: User) -> None:
    if not is_admin(user):
        raise AuthorizationError("Solo un administrador puede modificar sellers")


def _links(payload: SellerPayload) -> List[SellerLink]:
    return [SellerLink(position=i, name=link.name, url=link.url) for i, link in enumerate(payload.links)]


def create_seller(store: RecordStore, user: User, payload: SellerPayload) -> Seller:
    _require_admin(user)
    seller = store.create("seller", {
        "name": payload.name,
        "specialty": payload.specialty,
        "description": payload.description,
        "links": _links(payload),
    })
    logger.info("Seller %s created with %s links", seller.id, len(seller.links))
    return seller


def update_seller(store: RecordStore, user: User, seller_id: int, payload: SellerPayload) -> Seller:
    _require_admin(user)
    if store.get_by_id("seller", seller_id) is None:
        raise NotFoundError("Seller no encontrado", seller_id=seller_id)
    # Links are replaced as a whole; orphaned rows are deleted by the cascade
    return store.update("seller", seller_id, {
        "name": payload.name,
        "specialty": payload.specialty,
        "description": payload.description,
        "links": _links(payload),
    })


def delete_seller(store: RecordStore, seller_id: int) -> None:
    if store.get_by_id("seller", seller_id) is None:
        raise NotFoundError("Seller no encontrado", seller_id=seller_id)
    store.delete("seller", seller_id)


def search_sellers(store: RecordStore, q: str = None, specialty: str = None) -> List[Seller]:
    filters = []
    if q:
        like = f"%{q}%"
        filters.append(or_(Seller.name.ilike(like), Seller.specialty.ilike(like), Seller.description.ilike(like)))
    if specialty:
        filters.append(Seller.specialty == specialty)
    return store.query("seller", filters, order_by=["-created_at", "-id"])


def specialties_in_use(store: RecordStore) -> List[str]:
    sellers = store.get_all("seller", order_by="specialty")
    seen = []
    for s in sellers:
        if s.specialty not in seen:
            seen.append(s.specialty)
    return seen
