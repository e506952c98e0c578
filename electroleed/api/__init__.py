"""HTTP routes."""

from fastapi import APIRouter

from electroleed.api import admin, areas, auth, health, pages, user_page

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(pages.router, prefix="/web/auth", tags=["pages"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(user_page.router, prefix="/userPage", tags=["user"])
for area_router, area_prefix in areas.area_routers():
    router.include_router(area_router, prefix=area_prefix, tags=["areas"])
