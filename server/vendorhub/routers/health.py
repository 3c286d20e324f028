from fastapi import APIRouter

from vendorhub.responses import envelope

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return envelope(message="Server is running")
