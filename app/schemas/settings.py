"""
Pydantic schemas for settings endpoints.
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


class SettingUpdate(BaseModel):
    """Replace one top-level setting, or one entry of a nested setting when parent_key is given."""
    key: str = Field(..., description="Setting name, e.g. 'theme' or 'USD'")
    value: Any = Field(..., description="New value")
    parent_key: Optional[str] = Field(None, description="Nested setting holding the key, e.g. 'exchange_rates'")


class ExchangeRateUpdate(BaseModel):
    rate: float = Field(..., gt=0, description="Units of this currency per base currency unit")


class ConversionResponse(BaseModel):
    amount: float
    from_currency: str
    to_currency: str
    converted: float


class FormattedAmountResponse(BaseModel):
    amount: float
    currency: Optional[str] = None
    formatted: str
