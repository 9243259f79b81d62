"""Form schemas for product submissions.

Forms arrive as a flat mapping of field name to value (strings for text
inputs, ``Upload`` for file inputs).  ``parse_form`` turns that mapping
into a typed form or a dict of per-field messages; it never raises for
bad input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from storefront.domain.model.value_objects import Upload

REQUIRED = "required"
NOT_AN_IMAGE = "must be an image"
NOT_A_FILE = "must be a file"


def _reject_non_image(upload: Upload) -> Upload:
    if not upload.is_empty and not upload.is_image:
        raise PydanticCustomError("not_an_image", NOT_AN_IMAGE)
    return upload


def _reject_empty(upload: Upload) -> Upload:
    if upload.is_empty:
        raise PydanticCustomError("required", REQUIRED)
    return upload


class _ProductFields(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price_in_cents: int = Field(alias="priceInCents", ge=1)
    category: str = Field(min_length=1)

    @field_validator("category")
    @classmethod
    def _lowercase_category(cls, value: str) -> str:
        return value.lower()


class ProductForm(_ProductFields):
    """A new product: both assets are mandatory."""

    file: Upload
    image: Upload

    @field_validator("file", "image", mode="before")
    @classmethod
    def _must_be_upload(cls, value: Any) -> Any:
        if not isinstance(value, Upload):
            raise PydanticCustomError("required", REQUIRED)
        return value

    @field_validator("file")
    @classmethod
    def _file_present(cls, value: Upload) -> Upload:
        return _reject_empty(value)

    @field_validator("image")
    @classmethod
    def _image_present(cls, value: Upload) -> Upload:
        return _reject_empty(_reject_non_image(value))


class ProductUpdateForm(_ProductFields):
    """An edit: a missing or empty asset keeps the existing one."""

    file: Optional[Upload] = None
    image: Optional[Upload] = None

    @field_validator("file", "image", mode="before")
    @classmethod
    def _blank_means_none(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if not isinstance(value, Upload):
            raise PydanticCustomError("not_a_file", NOT_A_FILE)
        return value

    @field_validator("image")
    @classmethod
    def _image_type(cls, value: Upload | None) -> Upload | None:
        if value is None:
            return None
        return _reject_non_image(value)

    @property
    def new_file(self) -> Upload | None:
        if self.file is None or self.file.is_empty:
            return None
        return self.file

    @property
    def new_image(self) -> Upload | None:
        if self.image is None or self.image.is_empty:
            return None
        return self.image


FormT = TypeVar("FormT", bound=_ProductFields)


@dataclass(frozen=True)
class ParseResult(Generic[FormT]):
    data: FormT | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.data is not None


def parse_form(schema: type[FormT], raw: Mapping[str, Any]) -> ParseResult[FormT]:
    """Validate *raw* against *schema*."""
    try:
        return ParseResult(data=schema.model_validate(dict(raw)))
    except PydanticValidationError as exc:
        return ParseResult(errors=_field_errors(exc))


def _field_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__form__"
        message = REQUIRED if error["type"] == "missing" else error["msg"]
        errors.setdefault(name, []).append(message)
    return errors
