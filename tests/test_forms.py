import pytest

from ims_frontend.schemas.product import ProductFormData
from ims_frontend.utils.forms import FormValidationError, validate_product_form


def _form(**overrides):
    data = {"name": "Desk Lamp", "category": "Home & Garden", "price": "24.50", "quantity": "3"}
    data.update(overrides)
    return ProductFormData(**data)


def test_valid_form_is_converted():
    payload = validate_product_form(_form(description=""))
    assert payload.price == 24.5
    assert payload.quantity == 3
    assert payload.description == ""


def test_numbers_accepted_as_numbers():
    payload = validate_product_form(ProductFormData(
        name="Pen", category="Other", price=1.25, quantity=0,
    ))
    assert payload.quantity == 0


@pytest.mark.parametrize("price", ["0", "-3", "abc", "", "nan"])
def test_invalid_price(price):
    with pytest.raises(FormValidationError) as exc:
        validate_product_form(_form(price=price))
    assert exc.value.errors == {"price": "Valid price is required"}


@pytest.mark.parametrize("quantity", ["-1", "1.5", "", "many"])
def test_invalid_quantity(quantity):
    with pytest.raises(FormValidationError) as exc:
        validate_product_form(_form(quantity=quantity))
    assert exc.value.errors == {"quantity": "Valid quantity is required"}


def test_all_errors_reported_at_once():
    with pytest.raises(FormValidationError) as exc:
        validate_product_form(ProductFormData())
    assert exc.value.errors == {
        "name": "Product name is required",
        "category": "Category is required",
        "price": "Valid price is required",
        "quantity": "Valid quantity is required",
    }


def test_unknown_category_rejected():
    with pytest.raises(FormValidationError) as exc:
        validate_product_form(_form(category="Toys"))
    assert "category" in exc.value.errors


def test_blank_name_rejected():
    with pytest.raises(FormValidationError) as exc:
        validate_product_form(_form(name="   "))
    assert exc.value.errors == {"name": "Product name is required"}
