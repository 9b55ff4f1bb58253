"""Auth Schemas — registration/login payloads and the public user view.

Invariants:
    - Every payload field defaults to "" (missing fields decode, they are not rejected)
    - UserInfo never carries the password
"""

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Body of POST /register and POST /login."""
    model_config = ConfigDict(populate_by_name=True)

    login: str = ""
    password: str = ""
    email: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")


class UserInfo(BaseModel):
    """Logged-in user returned by POST /login."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    login: str
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class MessageResponse(BaseModel):
    message: str
