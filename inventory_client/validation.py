"""Input validation for product create/edit forms.

The Product model accepts any values; this is the boundary where user input
is checked before it reaches the API. Field keys are the wire names
(`nombre`, `precio`, `existencia`) so errors map straight onto form fields.

On validation failure, raise `FormValidationError` carrying every
`field_errors` entry at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from inventory_client.integrations.contracts.products import (
    FIELD_NAME,
    FIELD_PRICE,
    FIELD_STOCK,
    Product,
)


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Dict[str, Any], field: str, errors: Dict[str, str], *, message: str) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, message)
    return value


def parse_price(payload: Dict[str, Any], errors: Dict[str, str]) -> Decimal:
    raw = _strip(payload.get(FIELD_PRICE))
    if not raw:
        add_error(errors, FIELD_PRICE, "El precio es requerido")
        return Decimal(0)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        add_error(errors, FIELD_PRICE, "Ingrese un precio válido")
        return Decimal(0)
    if not value.is_finite():
        add_error(errors, FIELD_PRICE, "Ingrese un precio válido")
        return Decimal(0)
    if value < 0:
        add_error(errors, FIELD_PRICE, "El precio no puede ser negativo")
    return value


def parse_stock(payload: Dict[str, Any], errors: Dict[str, str]) -> int:
    raw = _strip(payload.get(FIELD_STOCK))
    if not raw:
        add_error(errors, FIELD_STOCK, "La existencia es requerida")
        return 0
    try:
        value = int(raw)
    except ValueError:
        add_error(errors, FIELD_STOCK, "Ingrese una existencia válida")
        return 0
    if value < 0:
        add_error(errors, FIELD_STOCK, "La existencia no puede ser negativa")
    return value


def validate_product_form(form_data: Dict[str, Any], product_id: Optional[str] = None) -> Product:
    """Validate raw form input and build the Product to send to the API.

    `product_id` is carried through when editing an existing product.
    """
    errors: Dict[str, str] = {}

    name = require_str(form_data, FIELD_NAME, errors, message="El nombre es requerido")
    price = parse_price(form_data, errors)
    stock = parse_stock(form_data, errors)

    if errors:
        raise FormValidationError(field_errors=errors)

    return Product(id=product_id, name=name, price=price, stock=stock)
