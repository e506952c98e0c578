"""Landing endpoints of the role areas (/admin, /estimator, ...)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from electroleed.models.role import Role
from electroleed.schemas.auth import AreaHomeResponse, Principal
from electroleed.security.gate import require_principal


def _area_router(area: str) -> APIRouter:
    router = APIRouter()

    @router.get("/home", response_model=AreaHomeResponse)
    def home(
        principal: Annotated[Principal, Depends(require_principal)],
    ) -> AreaHomeResponse:
        return AreaHomeResponse(
            area=area,
            username=principal.login,
            roles=principal.authorities,
        )

    return router


def area_routers() -> list[tuple[APIRouter, str]]:
    """One router per role, mounted at /<role name in lower case>."""
    return [(_area_router(role.value.lower()), f"/{role.value.lower()}") for role in Role]
