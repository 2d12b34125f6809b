"""
Field validation rules shared by the request schemas.

The predicates are pure functions so they can be used outside of a request.
The ``validate_*`` wrappers raise pydantic custom errors, which puts the
failure into the aggregated ``Validation failed`` response next to every
other violated field.
"""
import re
from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints
from pydantic_core import PydanticCustomError

USERNAME_PATTERN = re.compile(r"^[A-Za-z]+$")
PASSWORD_MIN_LENGTH = 6

USERNAME_RULES = "Username must contain only letters, start with a letter, and cannot be numbers only"
PASSWORD_RULES = (
    "Password must be at least 6 characters, contain letters and numbers, "
    "and have at least one capital letter"
)


def is_valid_username(username: str) -> bool:
    """Letters only, at least one of them."""
    return isinstance(username, str) and USERNAME_PATTERN.fullmatch(username) is not None


def is_strong_password(password: str) -> bool:
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return False
    return (
        re.search(r"[A-Za-z]", password) is not None
        and re.search(r"[0-9]", password) is not None
        and re.search(r"[A-Z]", password) is not None
    )


def validate_username(username: str) -> str:
    if not is_valid_username(username):
        raise PydanticCustomError("invalid_username", USERNAME_RULES)
    return username


def validate_password(password: str) -> str:
    if not is_strong_password(password):
        raise PydanticCustomError("weak_password", PASSWORD_RULES)
    return password


# Reusable field types
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Username = Annotated[str, AfterValidator(validate_username)]
Password = Annotated[str, AfterValidator(validate_password)]
Amount = Annotated[float, Field(ge=0, allow_inf_nan=False)]
RecordId = Annotated[int, Field(ge=1)]
