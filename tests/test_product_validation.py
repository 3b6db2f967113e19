from decimal import Decimal

import pytest

from inventory_client.validation import FormValidationError, validate_product_form


def test_valid_form_builds_product():
    product = validate_product_form({"nombre": " Mouse ", "precio": "299.99", "existencia": "20"})

    assert product.id is None
    assert product.name == "Mouse"
    assert product.price == Decimal("299.99")
    assert product.stock == 20


def test_edit_form_keeps_product_id():
    product = validate_product_form({"nombre": "Mouse", "precio": 0, "existencia": 0}, product_id="abc")
    assert product.id == "abc"
    assert product.price == 0
    assert product.stock == 0


def test_missing_fields_are_all_reported():
    with pytest.raises(FormValidationError) as exc_info:
        validate_product_form({})

    assert exc_info.value.field_errors == {
        "nombre": "El nombre es requerido",
        "precio": "El precio es requerido",
        "existencia": "La existencia es requerida",
    }


@pytest.mark.parametrize(
    "form, field, message",
    [
        ({"nombre": "A", "precio": "abc", "existencia": "1"}, "precio", "Ingrese un precio válido"),
        ({"nombre": "A", "precio": "-1", "existencia": "1"}, "precio", "El precio no puede ser negativo"),
        ({"nombre": "A", "precio": "1", "existencia": "1.5"}, "existencia", "Ingrese una existencia válida"),
        ({"nombre": "A", "precio": "1", "existencia": "-3"}, "existencia", "La existencia no puede ser negativa"),
        ({"nombre": "   ", "precio": "1", "existencia": "1"}, "nombre", "El nombre es requerido"),
    ],
)
def test_invalid_values(form, field, message):
    with pytest.raises(FormValidationError) as exc_info:
        validate_product_form(form)
    assert exc_info.value.field_errors == {field: message}
