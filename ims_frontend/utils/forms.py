"""
Form validation helpers
"""
from typing import Dict

from pydantic import ValidationError

from ims_frontend.schemas.product import ProductFormData, ProductPayload


class FormValidationError(Exception):
    """Local validation failed; nothing was sent to the backend"""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(", ".join(f"{field}: {msg}" for field, msg in errors.items()))


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a pydantic ValidationError to {field: message}, first message per field."""
    errors: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err.get("loc") else "__all__"
        if field in errors:
            continue
        ctx_error = (err.get("ctx") or {}).get("error")
        errors[field] = str(ctx_error) if ctx_error is not None else err["msg"]
    return errors


def validate_product_form(form: ProductFormData) -> ProductPayload:
    """
    Validate add/edit form input

    Raises:
        FormValidationError: with one message per failing field
    """
    try:
        return ProductPayload(**form.model_dump())
    except ValidationError as exc:
        raise FormValidationError(field_errors(exc)) from exc
