"""API status endpoint"""
from fastapi import APIRouter

from ..schemas import StatusOut

router = APIRouter(prefix="/api/v1", tags=["status"])


@router.get("/status", response_model=StatusOut)
def get_status():
    return StatusOut(message="API is up and running!")
