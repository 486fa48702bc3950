"""Shared Pydantic types for request / response bodies."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _check_email(value: str) -> str:
    """Reject malformed addresses but keep the submitted spelling."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


# Kept verbatim; ``EmailStr`` would lowercase the domain
EmailAddress = Annotated[str, AfterValidator(_check_email)]


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire.

    Accepts either spelling on input; FastAPI serialises responses by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
