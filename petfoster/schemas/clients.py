from typing import Optional

from pydantic import BaseModel, ConfigDict

from petfoster.schemas.users import UserOut


class ClientCreate(BaseModel):
    user_id: Optional[int] = None
    description: Optional[str] = None


class ClientUpdate(BaseModel):
    user_id: Optional[int] = None
    description: Optional[str] = None


class ClientOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user: Optional[UserOut] = None
    description: Optional[str] = None
