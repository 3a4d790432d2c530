from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from portfolio.database.supabase_client import get_supabase
from portfolio.modules.cv.service import CVService
from supabase import Client
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cv", tags=["cv"])


def get_cv_service(supabase: Client = Depends(get_supabase)) -> CVService:
    return CVService(supabase)


@router.get("/download")
async def download_cv(service: CVService = Depends(get_cv_service)):
    """Redirect to the CV file, or to the documents page when none is found"""
    try:
        url = service.find_cv_url()
    except Exception as e:
        logger.error(f"CV lookup failed: {e}")
        url = None
    return RedirectResponse(url or service.fallback_url(), status_code=307)
