from typing import Awaitable, Callable, Optional, Protocol

# Translate(text, target_language_code) -> translated text
TranslateFn = Callable[[str, str], Awaitable[str]]


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...
