import logging
from datetime import datetime
from typing import Optional

from common.constants import TABLE_EXAMPLE_CACHE


class SBCacheIO:
    """
    Key-value store backed by a Supabase table with columns (cache_key, payload).
    """

    cache_table = TABLE_EXAMPLE_CACHE

    def __init__(self, sb):
        self.sb = sb

    def get_item(self, key: str) -> Optional[str]:
        """
        Return stored payload for the key, None when absent.
        """
        res = (
            self.sb.table(self.cache_table)
            .select("payload")
            .eq("cache_key", key)
            .execute()
        )

        rows = res.data or []
        if not rows:
            return None
        return rows[0].get("payload")

    def set_item(self, key: str, value: str) -> None:
        """
        Upsert payload. Last writer wins on the same key.
        """
        res = (
            self.sb.table(self.cache_table)
            .upsert({"cache_key": key, "payload": value})
            .execute()
        )

        upserted = res.data or []

        logging.debug(f"Upserted {len(upserted)} cache rows. Time {datetime.now()}")
