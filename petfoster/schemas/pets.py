from typing import Optional

from pydantic import BaseModel, ConfigDict


class PetCreate(BaseModel):
    name: str
    species: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[float] = None
    description: Optional[str] = None


class PetUpdate(BaseModel):
    name: Optional[str] = None
    species: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[float] = None
    description: Optional[str] = None


class PetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[float] = None
    description: Optional[str] = None
