"""API routers."""

from studbook.api.horses import router as horses_router
from studbook.api.owners import router as owners_router

__all__ = [
    "horses_router",
    "owners_router",
]
