# influx/client/core/validation.py
"""
Base model for locally validated request values.

Every validation path (construction, ``model_validate*``, assignment)
raises :class:`RequestValidationError` instead of pydantic's own error.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from influx.client.core.exceptions import RequestValidationError


class RequestModel(BaseModel):
    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as ex:
            raise _invalid(type(self), ex) from ex

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as ex:
            raise RequestValidationError(f"Invalid value for '{name}': {ex}") from ex

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any):
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as ex:
            raise _invalid(cls, ex) from ex

    @classmethod
    def model_validate_json(cls, json_data: str | bytes, **kwargs: Any):
        try:
            return super().model_validate_json(json_data, **kwargs)
        except ValidationError as ex:
            raise _invalid(cls, ex) from ex


def _invalid(cls: type, ex: ValidationError) -> RequestValidationError:
    return RequestValidationError(f"Invalid {cls.__name__}: {ex}")
