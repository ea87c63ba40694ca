"""Shared response model config and error conversion for use cases."""

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from quill.domain.error import ValidationError


class ApiModel(BaseModel):
    """Model serialized with camelCase keys.

    Fields are declared in snake_case and may be populated by either name.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def to_domain_validation_error(error: PydanticValidationError) -> ValidationError:
    """Condense a pydantic error into a domain ValidationError.

    The message names each offending field, e.g. ``excerpt: String should
    have at most 200 characters``.
    """
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return ValidationError("; ".join(messages))
