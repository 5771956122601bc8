from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserIn(BaseModel):
    """Profil envoyé par le front à la première connexion."""
    model_config = ConfigDict(populate_by_name=True)

    email: str
    name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")

    @field_validator("email")
    @classmethod
    def _email_not_blank(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("email requis")
        return v
