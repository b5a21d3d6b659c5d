from fastapi import APIRouter

from api.routers import auth, tables, reservations

routes = APIRouter()

# Include all routers
routes.include_router(auth.router)
routes.include_router(tables.router)
routes.include_router(reservations.router)
