"""
Settings endpoints backed by the application's settings context.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import ValidationError

from app.schemas.settings import (
    ConversionResponse,
    ExchangeRateUpdate,
    FormattedAmountResponse,
    SettingUpdate,
)
from app.services.settings_service import SettingsContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["Settings"])


def get_settings_context(request: Request) -> SettingsContext:
    """The settings context owned by the application."""
    return request.app.state.settings_context


def _dump(context: SettingsContext) -> dict:
    return context.settings.model_dump(by_alias=True)


@router.get("")
def read_settings(context: SettingsContext = Depends(get_settings_context)):
    return _dump(context)


@router.patch("")
def update_settings(payload: SettingUpdate, context: SettingsContext = Depends(get_settings_context)):
    """Update one setting, or one nested entry when parent_key is given."""
    try:
        if payload.parent_key:
            context.update_nested_setting(payload.parent_key, payload.key, payload.value)
        else:
            context.update_setting(payload.key, payload.value)
    except KeyError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e.args[0]))
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.errors(include_url=False, include_context=False),
        )
    logger.info(f"Setting updated: {payload.parent_key + '.' if payload.parent_key else ''}{payload.key}")
    return _dump(context)


@router.put("/exchange-rates/{currency_code}")
def update_exchange_rate(
    currency_code: str,
    payload: ExchangeRateUpdate,
    context: SettingsContext = Depends(get_settings_context)
):
    context.update_exchange_rate(currency_code.upper(), payload.rate)
    return _dump(context)


@router.post("/toggle-theme")
def toggle_theme(context: SettingsContext = Depends(get_settings_context)):
    context.toggle_theme()
    return _dump(context)


@router.post("/toggle-direction")
def toggle_direction(context: SettingsContext = Depends(get_settings_context)):
    context.toggle_direction()
    return _dump(context)


@router.get("/convert", response_model=ConversionResponse)
def convert(
    amount: float = Query(...),
    from_currency: str = Query(..., alias="from"),
    to_currency: str = Query(..., alias="to"),
    context: SettingsContext = Depends(get_settings_context)
):
    return ConversionResponse(
        amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        converted=context.convert_currency(amount, from_currency, to_currency),
    )


@router.get("/format", response_model=FormattedAmountResponse)
def format_amount(
    amount: float = Query(...),
    currency: Optional[str] = Query(None),
    context: SettingsContext = Depends(get_settings_context)
):
    return FormattedAmountResponse(
        amount=amount,
        currency=currency,
        formatted=context.format_currency(amount, currency),
    )
