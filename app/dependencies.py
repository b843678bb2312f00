"""Shared FastAPI dependencies."""
from typing import Type, TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ParamsT = TypeVar("ParamsT", bound=BaseModel)


def request_params(model: Type[ParamsT]):
    """Build a dependency that reads ``model`` from the request parameters.

    Parameters may come from the query string, a form body, or both. A
    form value wins over a query value with the same name. Missing or
    malformed values are rejected with the usual 422 response.
    """

    async def dependency(request: Request) -> ParamsT:
        params = dict(request.query_params)
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            # Uploaded files are not parameters
            params.update((key, value) for key, value in form.items() if isinstance(value, str))
        try:
            return model.model_validate(params)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False))

    return dependency
