from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petfoster.api.common import get_query_descriptor
from petfoster.db.session import get_db
from petfoster.models.pet import Pet
from petfoster.schemas.pets import PetCreate, PetOut, PetUpdate
from petfoster.schemas.query import QueryDescriptor
from petfoster.services.crud import create_row, delete_row, load_row_or_404, query_rows, update_row
from petfoster.services.filter_fields import ENTITY_PETS, FilterFieldRegistry, get_filter_registry

router = APIRouter()


@router.post("", response_model=PetOut)
def create_pet(payload: PetCreate, db: Session = Depends(get_db)):
    return create_row(db, Pet, payload)


@router.get("", response_model=list[PetOut])
def list_pets(
    descriptor: QueryDescriptor = Depends(get_query_descriptor),
    registry: FilterFieldRegistry = Depends(get_filter_registry),
    db: Session = Depends(get_db),
):
    return query_rows(db, Pet, entity=ENTITY_PETS, descriptor=descriptor, registry=registry)


@router.get("/{pet_id}", response_model=PetOut)
def get_pet(pet_id: int, db: Session = Depends(get_db)):
    return load_row_or_404(db, Pet, pet_id)


@router.patch("/{pet_id}", response_model=PetOut)
def update_pet(pet_id: int, payload: PetUpdate, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Pet, pet_id)
    return update_row(db, row, payload)


@router.delete("/{pet_id}")
def delete_pet(pet_id: int, db: Session = Depends(get_db)):
    row = load_row_or_404(db, Pet, pet_id)
    return {"detail": delete_row(db, row)}
