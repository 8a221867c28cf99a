import logging
import os
from typing import Optional
from supabase import AsyncClient, acreate_client

logger = logging.getLogger(__name__)

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# ========================================================================
# SUPABASE
# ========================================================================

class SupabaseManager:
    def __init__(self, url: Optional[str] = SUPABASE_URL, key: Optional[str] = SUPABASE_KEY):
        self.url = url
        self.key = key
        self.client: Optional[AsyncClient] = None

    async def initialize(self):
        if self.client:
            return
        try:
            self.client = await acreate_client(self.url, self.key)
        except Exception as e:
            raise Exception(f"Could not connect to supabase, Error: {str(e)}") from e
        logger.info("Supabase client initialized for %s", self.url)

    def get_client(self) -> AsyncClient:
        if not self.client:
            raise Exception("Supabase client is not initialized, call initialize() first")
        return self.client
