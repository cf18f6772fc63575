from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from petfoster.schemas.pets import PetOut
from petfoster.schemas.users import UserOut


class FosterCreate(BaseModel):
    pet_id: int
    start_date: date
    user_id: Optional[int] = None
    description: Optional[str] = None
    end_date: Optional[date] = None


class FosterUpdate(BaseModel):
    pet_id: Optional[int] = None
    user_id: Optional[int] = None
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class FosterOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user: Optional[UserOut] = None
    description: Optional[str] = None
    pet: Optional[PetOut] = None
    start_date: date
    end_date: Optional[date] = None
