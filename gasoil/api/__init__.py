"""Routes API / API routes."""

from fastapi import APIRouter

from gasoil.api import (
    vehicles,
    trips,
    calculator,
    dashboard,
    exports,
)

api_router = APIRouter(prefix="/api")

api_router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
api_router.include_router(trips.router, prefix="/trips", tags=["trips"])
api_router.include_router(calculator.router, prefix="/calculator", tags=["calculator"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(exports.router, prefix="/exports", tags=["exports"])
