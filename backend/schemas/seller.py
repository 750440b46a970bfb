# backend/schemas/seller.py
from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlparse


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc) and " " not in url


# A catalog link as typed in the form; blank rows are allowed and dropped
class SellerLinkIn(BaseModel):
    name: str = ""
    url: str = ""

    @field_validator("name", "url")
    @classmethod
    def _strip(cls, v: str) -> str:
        return (v or "").strip()

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: str) -> str:
        if v and not is_valid_url(v):
            raise ValueError("URL inválida")
        return v


# Create / update payload for a seller and its complete set of links
class SellerPayload(BaseModel):
    name: str
    specialty: str
    description: Optional[str] = None
    links: List[SellerLinkIn] = []

    @field_validator("name", "specialty")
    @classmethod
    def _required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("Campo requerido")
        return v

    @field_validator("description")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def _keep_complete_links(self):
        self.links = [link for link in self.links if link.name and link.url]
        if not self.links:
            raise ValueError("Debe agregar al menos un link de catálogo")
        return self


class SellerLinkOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    seller_id: int
    name: str
    url: str
    created_at: Optional[datetime] = None


class SellerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    specialty: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    links: List[SellerLinkOut] = []
