from pydantic import BaseModel, Field, ConfigDict

class User(BaseModel):
    """Registered user as held by the identity registry."""
    id: int = Field(..., gt=0)
    name: str
    email: str
    phone: str
    secret: str = Field(..., repr=False)

    model_config = ConfigDict(frozen=True)
