from fastapi import APIRouter

from credit_ledger.interfaces.http.routers import admin, identity, operations, records, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(operations.router, prefix="/operations", tags=["operations"])
    router.include_router(records.router, prefix="/records", tags=["records"])
    router.include_router(users.router, prefix="/users", tags=["users"])
    router.include_router(identity.router, prefix="/identity", tags=["identity"])
    router.include_router(admin.router, prefix="/admin", tags=["admin"])
    return router


__all__ = [
    "create_api_router",
]
