from pydantic import BaseModel, ConfigDict


# --- User ---

class UserBase(BaseModel):
    name: str
    email: str


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    """Full replacement of the mutable fields; both are required."""


class UserResponse(UserBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


# --- Errors ---

class ErrorResponse(BaseModel):
    detail: str
