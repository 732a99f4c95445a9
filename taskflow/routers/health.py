from fastapi import APIRouter

from ..config import settings

router = APIRouter()


@router.get("")
def health():
    return {"ok": True, "env": settings.app_env}
