from fastapi import APIRouter, Depends

from petfoster.api import auth, clients, foster, pets, users
from petfoster.core.deps import get_current_user

protected = [Depends(get_current_user)]

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(users.router, prefix="/users", tags=["Users"], dependencies=protected)
router.include_router(pets.router, prefix="/pets", tags=["Pets"], dependencies=protected)
router.include_router(clients.router, prefix="/clients", tags=["Clients"], dependencies=protected)
router.include_router(foster.router, prefix="/foster", tags=["Foster"], dependencies=protected)
