import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel

from ...domain.models.user import User

# Shape check only: no normalization, no deliverability or special-use
# domain rules, so the address is stored exactly as the client sent it
EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


def check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email")
    return value


EmailAddress = Annotated[str, AfterValidator(check_email)]


class UserCreateRequest(BaseModel):
    """DTO for user creation request"""
    email: EmailAddress
    password: str


class UserUpdateRequest(BaseModel):
    """
    DTO for partial user update; at least one field must be set.
    
    Absent fields keep their None default; an explicit null is validated
    like any other value and rejected as the wrong type.
    """
    email: EmailAddress = None
    password: str = None


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        # Built field by field so a loaded hash can never leak into a response
        return cls(id=user.id or "", email=user.email)


class MessageResponse(BaseModel):
    """DTO for responses that only carry a message"""
    message: str
