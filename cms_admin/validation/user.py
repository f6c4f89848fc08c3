"""New admin user form (credentials are emailed to the user afterwards)."""

import re
from typing import Annotated

from pydantic import ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from cms_admin.validation.base import FormSchema, min_length, valid_email

SPECIAL_CHARACTERS = r"[!@#$%^&*(),.?\":{}|<>]"

PASSWORD_CHECKS = {
    "length": lambda p: len(p) >= 8,
    "uppercase": lambda p: re.search(r"[A-Z]", p) is not None,
    "lowercase": lambda p: re.search(r"[a-z]", p) is not None,
    "number": lambda p: re.search(r"[0-9]", p) is not None,
    "special": lambda p: re.search(SPECIAL_CHARACTERS, p) is not None,
}


def password_checks(password: str) -> dict[str, bool]:
    """Which of the password rules ``password`` satisfies (for the checklist UI)."""
    return {name: check(password) for name, check in PASSWORD_CHECKS.items()}


class NewUserSchema(FormSchema):
    username: Annotated[str, min_length(3, "Username must be at least 3 characters")]
    email: Annotated[str, valid_email("Invalid email format")]
    password: str
    confirm_password: str

    @field_validator("password")
    @classmethod
    def strong_password(cls, value: str) -> str:
        if not all(password_checks(value).values()):
            raise PydanticCustomError("weak_password", "Password does not meet all requirements")
        return value

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise PydanticCustomError("password_mismatch", "Passwords do not match")
        return value
