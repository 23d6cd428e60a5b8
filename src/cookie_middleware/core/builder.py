"""Chainable builder for cookie stores.

Examples:
    Preparing a store for a response that sets and clears cookies::

        from cookie_middleware.core.store import CookieStore
        from cookie_middleware.models import CookieRecord

        store = (
            CookieStore.builder()
            .add(CookieRecord(name="session", value="abc", http_only=True))
            .add(CookieRecord(name="theme", value="dark"))
            .build()
        )
"""

from cookie_middleware.core.store import CookieStore
from cookie_middleware.models import CookieRecord


class CookieStoreBuilder:
    """Builder wrapping a CookieStore.

    Attributes:
        store: The store being built. Mutations are applied to it in place.
    """

    def __init__(self, store: CookieStore | None = None) -> None:
        """Initialize the builder.

        Args:
            store: Store to continue building (a new empty store if omitted)
        """
        self.store = store if store is not None else CookieStore()

    def add(self, record: CookieRecord) -> "CookieStoreBuilder":
        """Add or overwrite a cookie and return the builder."""
        self.store.add(record)
        return self

    def remove(self, cookie: CookieRecord | str) -> "CookieStoreBuilder":
        """Remove a cookie and return the builder."""
        self.store.remove(cookie)
        return self

    def build(self) -> CookieStore:
        """Return the built store."""
        return self.store
