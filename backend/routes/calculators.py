# backend/routes/calculators.py
from dataclasses import asdict

from fastapi import APIRouter

from config import settings
from schemas.calculators import (
    CalculatorPresets, ImportCostRequest, ImportCostResponse, PriceRequest, PriceResponse,
)
from utils.import_cost import INTERNAL_SHIPPING_OPTIONS, ImportItem, calculate_import_cost
from utils.pricing import MARGIN_PRESETS, PLATFORM_COMMISSIONS, calculate_price

router = APIRouter(prefix="/calculators", tags=["Calculators"])

# Stateless; recomputed on every form change, nothing is stored.


@router.post("/price", response_model=PriceResponse)
def price_calculator(payload: PriceRequest):
    calc = calculate_price(
        payload.base_cost,
        import_tax_percent=payload.import_tax_percent,
        shipping_percent=payload.shipping_percent,
        profit_margin_percent=payload.profit_margin_percent,
        platform_commission_percent=payload.platform_commission_percent,
    )
    out = asdict(calc)
    out["shares"] = calc.shares()
    if payload.exchange_rate:
        out["exchange_rate"] = payload.exchange_rate
        out["converted"] = calc.converted(payload.exchange_rate)
    return out


@router.post("/import-cost", response_model=ImportCostResponse)
def import_cost_calculator(payload: ImportCostRequest):
    items = [ImportItem(**item.model_dump()) for item in payload.items]
    calc = calculate_import_cost(items)
    out = asdict(calc)
    if payload.exchange_rate:
        out["exchange_rate"] = payload.exchange_rate
        out["total_cost_converted"] = calc.total_cost * payload.exchange_rate
    return out


@router.get("/presets", response_model=CalculatorPresets)
def calculator_presets():
    return {
        "margins": MARGIN_PRESETS,
        "platform_commissions": PLATFORM_COMMISSIONS,
        "internal_shipping_options": list(INTERNAL_SHIPPING_OPTIONS),
        "default_exchange_rate": settings.USD_TO_ARS_RATE,
    }
