from typing import Optional


class InMemoryStore:
    """
    Process-local key-value store. Used when Supabase is not configured, and in tests.
    """

    def __init__(self, seed: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(seed or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def __len__(self) -> int:
        return len(self._items)
