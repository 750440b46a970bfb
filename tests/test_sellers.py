import pytest
from pydantic import ValidationError as PydanticValidationError

from models.users import User
from schemas.seller import SellerPayload, is_valid_url
from utils.errors import AuthorizationError, NotFoundError
from utils.sellers import (
    create_seller, delete_seller, search_sellers, specialties_in_use, update_seller,
)

ADMIN = User(id=1, email="admin@tienda.com.ar", role="Admin")
USER = User(id=2, email="vendedor@tienda.com.ar", role="user")


def _payload(**overrides):
    data = {
        "name": "Importadora Flores",
        "specialty": "Zapatillas",
        "description": "Réplicas AAA, envíos desde Flores",
        "links": [{"name": "Catálogo", "url": "https://catalogo.example.com/flores"}],
    }
    data.update(overrides)
    return SellerPayload(**data)


class TestSellerPayload:

    @pytest.mark.parametrize("url,ok", [
        ("https://example.com", True),
        ("http://wa.me/5491100000000", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("https://exa mple.com", False),
        ("https://", False),
    ])
    def test_url_rules(self, url, ok):
        assert is_valid_url(url) is ok

    def test_incomplete_links_are_dropped(self):
        payload = _payload(links=[
            {"name": "Instagram", "url": "https://instagram.com/flores"},
            {"name": "", "url": "https://drive.example.com/x"},
            {"name": "Vacío", "url": "  "},
        ])
        assert [link.name for link in payload.links] == ["Instagram"]

    def test_at_least_one_link_required(self):
        with pytest.raises(PydanticValidationError):
            _payload(links=[{"name": "Sin url", "url": ""}])

    def test_invalid_url_rejected(self):
        with pytest.raises(PydanticValidationError):
            _payload(links=[{"name": "Mal", "url": "not a url"}])

    def test_name_and_specialty_required(self):
        with pytest.raises(PydanticValidationError):
            _payload(name="   ")
        with pytest.raises(PydanticValidationError):
            _payload(specialty="")

    def test_blank_description_becomes_none(self):
        assert _payload(description="  ").description is None


class TestSellerService:

    def test_admin_creates_seller_with_ordered_links(self, store):
        seller = create_seller(store, ADMIN, _payload(links=[
            {"name": "Drive", "url": "https://drive.example.com/a"},
            {"name": "Instagram", "url": "https://instagram.com/a"},
        ]))
        assert seller.id is not None
        assert [link.name for link in seller.links] == ["Drive", "Instagram"]
        assert [link.position for link in seller.links] == [0, 1]

    def test_non_admin_cannot_create(self, store):
        with pytest.raises(AuthorizationError):
            create_seller(store, USER, _payload())
        assert store.get_all("seller") == []

    def test_anonymous_cannot_update(self, store):
        seller = create_seller(store, ADMIN, _payload())
        with pytest.raises(AuthorizationError):
            update_seller(store, None, seller.id, _payload(name="Otro"))

    def test_update_replaces_links(self, store):
        seller = create_seller(store, ADMIN, _payload())
        updated = update_seller(store, ADMIN, seller.id, _payload(links=[
            {"name": "Nuevo", "url": "https://nuevo.example.com"},
        ]))
        assert [link.name for link in updated.links] == ["Nuevo"]

    def test_update_unknown_seller(self, store):
        with pytest.raises(NotFoundError):
            update_seller(store, ADMIN, 77, _payload())

    def test_delete_seller(self, store):
        seller = create_seller(store, ADMIN, _payload())
        delete_seller(store, seller.id)
        assert store.get_by_id("seller", seller.id) is None
        with pytest.raises(NotFoundError):
            delete_seller(store, seller.id)

    def test_search(self, store):
        create_seller(store, ADMIN, _payload(name="Importadora Flores", specialty="Zapatillas"))
        create_seller(store, ADMIN, _payload(name="Once Textil", specialty="Remeras", description=None))

        assert [s.name for s in search_sellers(store, q="once")] == ["Once Textil"]
        assert [s.name for s in search_sellers(store, specialty="Zapatillas")] == ["Importadora Flores"]
        assert len(search_sellers(store)) == 2

    def test_specialties_in_use(self, store):
        create_seller(store, ADMIN, _payload(specialty="Remeras"))
        create_seller(store, ADMIN, _payload(specialty="Buzos"))
        create_seller(store, ADMIN, _payload(specialty="Remeras"))
        assert specialties_in_use(store) == ["Buzos", "Remeras"]
