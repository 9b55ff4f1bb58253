"""User Directory Schemas — CRUD payloads and responses.

Invariants:
    - Payload fields default to ""; an "id" sent by the client is ignored
    - UserResponse.id is the database-assigned identifier
"""

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Body of POST /user and PUT /user/{id}."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = ""
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    email: str = ""
    phone: str = ""


class UserResponse(UserPayload):
    model_config = ConfigDict(populate_by_name=True)

    id: int
