from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User as returned by the API (no credential)."""
    id: int
    name: str
    email: str
    phone: str

    model_config = ConfigDict(from_attributes=True)
