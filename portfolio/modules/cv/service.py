from supabase import Client
from portfolio.config import settings
from portfolio.modules.storage.service import StorageFolderService
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class CVService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.storage = StorageFolderService(supabase)

    def find_cv_url(self) -> Optional[str]:
        """Public URL of the first configured CV path that exists in the bucket"""
        for path in settings.get_cv_candidate_paths():
            if self.storage.exists(path):
                logger.info(f"Serving CV from {path}")
                return self.storage.public_url(path)
        return None

    def fallback_url(self) -> str:
        return f"{settings.site_url.rstrip('/')}/documents"
