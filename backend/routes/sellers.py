# backend/routes/sellers.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from models.users import User
from schemas.seller import SellerOut, SellerPayload
from utils.audit import write_log, client_ip, actor_id
from utils.errors import NotFoundError
from utils.record_store import RecordStore, get_store
from utils.sellers import (
    SPECIALTIES, create_seller, delete_seller, search_sellers, specialties_in_use, update_seller,
)
from utils.tokenJWT import get_current_user, get_optional_user

router = APIRouter(prefix="/sellers", tags=["Sellers"])

# Supplier directory. Anyone can browse; create and update need an admin token.


@router.get("", response_model=List[SellerOut])
def list_sellers(
    q: Optional[str] = Query(None, description="Busca en nombre, especialidad y descripción"),
    specialty: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store),
):
    return search_sellers(store, q=q, specialty=specialty)


@router.get("/specialties", response_model=List[str])
def used_specialties(store: RecordStore = Depends(get_store)):
    return specialties_in_use(store)


@router.get("/suggested-specialties", response_model=List[str])
def suggested_specialties():
    return SPECIALTIES


@router.get("/{seller_id}", response_model=SellerOut)
def get_seller(seller_id: int, store: RecordStore = Depends(get_store)):
    seller = store.get_by_id("seller", seller_id)
    if seller is None:
        raise NotFoundError("Seller no encontrado", seller_id=seller_id)
    return seller


@router.post("", response_model=SellerOut, status_code=201)
def add_seller(
    payload: SellerPayload,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    seller = create_seller(store, current_user, payload)
    write_log(
        store.db, user_id=current_user.id, action="SELLER_CREATE", resource="sellers",
        status="SUCCESS", ip=client_ip(request), meta={"id": seller.id, "links": len(payload.links)},
    )
    return seller


@router.put("/{seller_id}", response_model=SellerOut)
def replace_seller(
    seller_id: int,
    payload: SellerPayload,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
):
    seller = update_seller(store, current_user, seller_id, payload)
    write_log(
        store.db, user_id=current_user.id, action="SELLER_UPDATE", resource="sellers",
        status="SUCCESS", ip=client_ip(request), meta={"id": seller.id, "links": len(payload.links)},
    )
    return seller


@router.delete("/{seller_id}")
def remove_seller(
    seller_id: int,
    request: Request,
    store: RecordStore = Depends(get_store),
    current_user: Optional[User] = Depends(get_optional_user),
):
    delete_seller(store, seller_id)
    write_log(
        store.db, user_id=actor_id(current_user), action="SELLER_DELETE", resource="sellers",
        status="SUCCESS", ip=client_ip(request), meta={"id": seller_id},
    )
    return {"detail": f"Seller {seller_id} deleted"}
