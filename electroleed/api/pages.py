"""Public pages reachable without a session."""

from fastapi import APIRouter

from electroleed.schemas.auth import PageResponse

router = APIRouter()


@router.get("/login", response_model=PageResponse)
def login_page() -> PageResponse:
    return PageResponse(page="auth/login")


@router.get("/about_author", response_model=PageResponse)
def about_author_page() -> PageResponse:
    return PageResponse(page="auth/about_author")
