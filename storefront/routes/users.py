from fastapi import APIRouter

router = APIRouter(prefix="/api/users", tags=["users"])
