"""
Settings context for user/session preferences.

Holds one immutable settings record (theme, language, currencies, exchange
rates, notification toggles). Every change replaces the record, persists it
through an injected storage backend and notifies subscribers.
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SETTINGS_STORAGE_KEY = "erpSettings"

THEME_OPTIONS = {
    "LIGHT": "light",
    "DARK": "dark",
    "SYSTEM": "system",
}

CURRENCY_OPTIONS: Dict[str, Dict[str, Any]] = {
    "AFN": {
        "code": "AFN",
        "symbol": "؋",
        "name": "Afghan Afghani",
        "decimals": 2,
    },
    "USD": {
        "code": "USD",
        "symbol": "$",
        "name": "US Dollar",
        "decimals": 2,
    },
}
FALLBACK_CURRENCY = "AFN"


class SettingsRecord(BaseModel):
    """Stored settings. Serialized with camelCase keys, the shape the frontend stores."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    theme: str = Field(default=THEME_OPTIONS["LIGHT"], pattern="^(light|dark|system)$")
    language: str = "en"
    default_currency: str = "AFN"
    secondary_currency: str = "USD"
    currency_format: str = Field(default="symbol-first", pattern="^(symbol-first|symbol-last)$")
    date_format: str = "MM/DD/YYYY"
    direction_rtl: bool = Field(default=False, alias="directionRTL")
    exchange_rates: Dict[str, float] = Field(
        # 1 AFN = 0.01142 USD
        default_factory=lambda: {"AFN": 1, "USD": 0.01142}
    )
    notifications: Dict[str, bool] = Field(
        default_factory=lambda: {"lowStock": True, "payments": True, "orders": True}
    )


NESTED_SETTINGS = ("exchange_rates", "notifications")


class SettingsStorage(ABC):
    """Key/value persistence for the serialized settings record."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class InMemorySettingsStorage(SettingsStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileSettingsStorage(SettingsStorage):
    """Stores every key in one JSON object on disk."""

    def __init__(self, path: str):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        """Raises OSError or ValueError when the file is unreadable."""
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, ValueError) as e:
            logger.warning(f"Settings file {self.path} is unreadable, rewriting it: {e}")
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, ensure_ascii=False, indent=2)


Subscriber = Callable[[SettingsRecord], None]


class SettingsContext:
    """
    Application-owned settings state.

    Created once by the composition root with the storage it should use.
    Updates are synchronous replacements of the record; there is no locking.
    """

    def __init__(self, storage: SettingsStorage, key: str = SETTINGS_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._subscribers: List[Subscriber] = []
        self._settings = self._load()

    def _load(self) -> SettingsRecord:
        try:
            raw = self.storage.get(self.key)
        except (OSError, ValueError) as e:
            logger.warning(f"Stored settings are unreadable, using defaults: {e}")
            return SettingsRecord()
        if not raw:
            return SettingsRecord()
        try:
            return SettingsRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Stored settings are invalid, using defaults: {e}")
            return SettingsRecord()

    @property
    def settings(self) -> SettingsRecord:
        return self._settings

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every replacement. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _replace(self, data: Dict[str, Any]) -> SettingsRecord:
        record = SettingsRecord.model_validate(data)
        self._settings = record
        self.storage.set(self.key, record.model_dump_json(by_alias=True))
        for callback in list(self._subscribers):
            callback(record)
        return record

    def update_setting(self, key: str, value: Any) -> SettingsRecord:
        """Replace one top-level field."""
        if key not in SettingsRecord.model_fields:
            raise KeyError(f"Unknown setting: {key}")
        data = self._settings.model_dump()
        data[key] = value
        return self._replace(data)

    def update_nested_setting(self, parent_key: str, key: str, value: Any) -> SettingsRecord:
        """Replace one entry of a nested mapping, leaving its siblings alone."""
        if parent_key not in NESTED_SETTINGS:
            raise KeyError(f"Unknown nested setting: {parent_key}")
        data = self._settings.model_dump()
        data[parent_key] = {**data[parent_key], key: value}
        return self._replace(data)

    def update_exchange_rate(self, currency_code: str, rate: float) -> SettingsRecord:
        return self.update_nested_setting("exchange_rates", currency_code, rate)

    def convert_currency(self, amount: float, from_currency: str, to_currency: str) -> float:
        """
        Convert through the base currency: ``amount / rate[from] * rate[to]``.

        Returns ``amount`` unchanged when either rate is unknown.
        """
        rates = self._settings.exchange_rates
        if not rates.get(from_currency) or not rates.get(to_currency):
            return amount

        value_in_base = amount / rates[from_currency]
        return value_in_base * rates[to_currency]

    def format_currency(self, amount: float, currency_code: Optional[str] = None) -> str:
        """Render ``amount`` with the currency's precision and symbol."""
        code = currency_code or self._settings.default_currency
        currency = CURRENCY_OPTIONS.get(code) or CURRENCY_OPTIONS[FALLBACK_CURRENCY]
        symbol, decimals = currency["symbol"], currency["decimals"]

        formatted_amount = f"{float(amount):,.{decimals}f}"

        if self._settings.currency_format == "symbol-first":
            return f"{symbol}{formatted_amount}"
        return f"{formatted_amount} {symbol}"

    def toggle_theme(self) -> SettingsRecord:
        theme = THEME_OPTIONS["DARK"] if self._settings.theme == THEME_OPTIONS["LIGHT"] else THEME_OPTIONS["LIGHT"]
        return self.update_setting("theme", theme)

    def toggle_direction(self) -> SettingsRecord:
        return self.update_setting("direction_rtl", not self._settings.direction_rtl)
