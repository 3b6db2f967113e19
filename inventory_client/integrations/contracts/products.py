"""
Product contract.

Defines the catalogue item exchanged with the inventory API, e.g.:
- id, nombre, precio, existencia, fechaRegistro on the wire
- id, name, price, stock, registered_at in Python

These contracts must be used by both:
- clients/mocks/products.py (in-memory catalogue for development)
- clients/real_http/products.py (the inventory REST API)

Decoding is permissive: missing or malformed fields fall back to defaults,
so a bad upstream record never breaks a listing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

NO_DATE_PLACEHOLDER = "Sin fecha"
INVALID_DATE_PLACEHOLDER = "Fecha inválida"

# Wire field names (the server API is in Spanish)
FIELD_ID = "id"
FIELD_NAME = "nombre"
FIELD_PRICE = "precio"
FIELD_STOCK = "existencia"
FIELD_REGISTERED_AT = "fechaRegistro"

_FRACTION_RE = re.compile(r"\.(\d+)")
_INT_RE = re.compile(r"-?[0-9]+")


@dataclass(frozen=True)
class Product:
    name: str
    price: Decimal
    stock: int
    id: Optional[str] = None
    registered_at: Optional[str] = None  # ISO-8601, set by the server

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Product":
        raw_id = data.get(FIELD_ID)
        raw_date = data.get(FIELD_REGISTERED_AT)
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            name=_as_str(data.get(FIELD_NAME)),
            price=_as_decimal(data.get(FIELD_PRICE)),
            stock=_as_int(data.get(FIELD_STOCK)),
            registered_at=str(raw_date) if raw_date is not None else None,
        )

    def to_json(self) -> Dict[str, Any]:
        """Request body for create/update. id and fechaRegistro belong to the server.

        Raises ValueError for a NaN or infinite price, which has no JSON form.
        """
        if not self.price.is_finite():
            raise ValueError(f"{FIELD_PRICE} must be a finite number, got {self.price}")
        return {
            FIELD_NAME: self.name,
            FIELD_PRICE: float(self.price),
            FIELD_STOCK: self.stock,
        }

    def with_id(self, product_id: str) -> "Product":
        return replace(self, id=product_id)

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    @property
    def formatted_registration_date(self) -> str:
        if self.registered_at is None:
            return NO_DATE_PLACEHOLDER
        try:
            moment = parse_timestamp(self.registered_at)
        except (TypeError, ValueError):
            return INVALID_DATE_PLACEHOLDER
        return f"{moment.day}/{moment.month}/{moment.year}"

    @property
    def formatted_price(self) -> str:
        return f"{self.price:.2f}"

    @property
    def in_stock(self) -> bool:
        return self.stock > 0


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp as sent by the API.

    Accepts a trailing ``Z`` and any number of fractional-second digits
    (the server emits 7), which ``datetime.fromisoformat`` rejects on
    older interpreters. Raises ValueError when the text is not a timestamp.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _as_decimal(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, (Decimal, int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            logger.warning("Ignoring non-numeric %s value: %r", FIELD_PRICE, value)
            return Decimal(0)
        if amount.is_finite():
            return amount
    logger.warning("Ignoring unsupported %s value: %r", FIELD_PRICE, value)
    return Decimal(0)


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_RE.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # over the interpreter's int-string length limit
            pass
    logger.warning("Ignoring unsupported %s value: %r", FIELD_STOCK, value)
    return 0
