"""Cookie store tracking a request's original and current cookies.

The store is the state machine at the heart of the middleware. Every cookie
name maps to one entry holding three pieces of state:

    original (from the request) / current (set by the application) / removed

from which the entry is classified as:

    UNMODIFIED  no current value, or current equals original
    ADDED       current value, no original
    OVERWRITTEN current value differing from the original
    REMOVED     original existed and the name was removed

The delta sent back to the client contains only ADDED, OVERWRITTEN and
REMOVED entries.

Examples:
    Reading and mutating cookies::

        from cookie_middleware.core.store import CookieStore
        from cookie_middleware.models import CookieRecord

        store = CookieStore.from_headers({"cookie": "session=abc; theme=dark"})
        store.get("theme").value  # "dark"

        store.add(CookieRecord(name="theme", value="light"))
        store.remove("session")

        [entry.kind for entry in store.delta()]
        # [DeltaKind.REMOVED, DeltaKind.OVERWRITTEN]
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from cookie_middleware.codec import CookieCodec
from cookie_middleware.config import CookieConfig
from cookie_middleware.core.parser import cookies_from_header_values, cookies_from_headers
from cookie_middleware.models import CookieRecord, DeltaEntry, DeltaKind

if TYPE_CHECKING:
    from cookie_middleware.core.builder import CookieStoreBuilder


class _Entry:
    """Original/current/removed state for a single cookie name."""

    __slots__ = ("original", "current", "removed", "removal")

    def __init__(self, original: CookieRecord | None = None) -> None:
        self.original = original
        self.current: CookieRecord | None = None
        self.removed = False
        # Record whose path/domain the removal directive targets
        self.removal: CookieRecord | None = None

    @property
    def visible(self) -> CookieRecord | None:
        if self.removed:
            return None
        return self.current if self.current is not None else self.original

    @property
    def kind(self) -> DeltaKind:
        if self.removed:
            return DeltaKind.REMOVED
        if self.current is None:
            return DeltaKind.UNMODIFIED
        if self.original is None:
            return DeltaKind.ADDED
        if self.current == self.original:
            return DeltaKind.UNMODIFIED
        return DeltaKind.OVERWRITTEN


class CookieStore:
    """Cookies of one request and the changes made to them.

    A store is created once per request, either empty or from the request's
    ``Cookie`` headers, mutated while the request is handled, and turned into
    ``Set-Cookie`` headers when the response is sent. It performs no I/O and
    takes no locks; each request owns its own instance.
    """

    def __init__(self) -> None:
        """Create an empty store with no original cookies."""
        self._entries: dict[str, _Entry] = {}

    @classmethod
    def from_headers(
        cls,
        headers: Any,
        codec: CookieCodec | None = None,
        config: CookieConfig | None = None,
    ) -> "CookieStore":
        """Build a store from every ``Cookie`` header in ``headers``.

        Args:
            headers: A header mapping, Starlette ``Headers`` or raw
                ``(name, value)`` pairs.
            codec: Codec used to parse each pair.
            config: Parsing policy.

        Returns:
            A store whose original set holds every parsed cookie. For a
            repeated name the last occurrence wins.

        Raises:
            CookieParseError: If any header value or pair is malformed and
                ``config.fail_fast`` is True. No store is returned.
        """
        store = cls()
        for record in cookies_from_headers(headers, codec=codec, config=config):
            store.add_original(record)
        return store

    @classmethod
    def from_header_values(
        cls,
        values: list[str | bytes],
        codec: CookieCodec | None = None,
        config: CookieConfig | None = None,
    ) -> "CookieStore":
        """Build a store from raw ``Cookie`` header values.

        Raises:
            CookieParseError: As for ``from_headers``.
        """
        store = cls()
        for record in cookies_from_header_values(values, codec=codec, config=config):
            store.add_original(record)
        return store

    @classmethod
    def builder(cls) -> "CookieStoreBuilder":
        """Start a builder for a new, empty store."""
        return cls().into_builder()

    def into_builder(self) -> "CookieStoreBuilder":
        """Wrap this store in a builder for chained mutations."""
        from cookie_middleware.core.builder import CookieStoreBuilder

        return CookieStoreBuilder(self)

    def add_original(self, record: CookieRecord) -> None:
        """Record a cookie as sent by the client.

        Replaces any previous original of the same name. A pending add or
        removal of that name is kept, and is classified against the new
        original.
        """
        entry = self._entries.get(record.name)
        if entry is None:
            self._entries[record.name] = _Entry(original=record)
        else:
            entry.original = record

    def get(self, name: str) -> CookieRecord | None:
        """Return the current record for ``name``, or None if absent or removed."""
        entry = self._entries.get(name)
        return entry.visible if entry is not None else None

    def original(self, name: str) -> CookieRecord | None:
        """Return the record the client originally sent for ``name``."""
        entry = self._entries.get(name)
        return entry.original if entry is not None else None

    def kind(self, name: str) -> DeltaKind | None:
        """Return how ``name`` changed, or None if the store has never seen it."""
        entry = self._entries.get(name)
        return entry.kind if entry is not None else None

    def add(self, record: CookieRecord) -> None:
        """Add or overwrite a cookie, clearing any earlier removal of its name."""
        entry = self._entries.get(record.name)
        if entry is None:
            entry = self._entries[record.name] = _Entry()
        entry.current = record
        entry.removed = False
        entry.removal = None

    def remove(self, cookie: CookieRecord | str) -> None:
        """Remove a cookie by record or by name.

        If the client sent the cookie, the name is tombstoned so the delta
        carries a removal directive; a record passed here supplies the path
        and domain of that directive. A cookie the client never sent is simply
        forgotten and produces no directive.
        """
        name = cookie if isinstance(cookie, str) else cookie.name
        entry = self._entries.get(name)
        if entry is None:
            return

        if entry.original is None:
            del self._entries[name]
            return

        entry.current = None
        entry.removed = True
        entry.removal = cookie if isinstance(cookie, CookieRecord) else entry.original

    def iter(self) -> Iterator[CookieRecord]:
        """Iterate over present cookies in first-seen order."""
        for entry in self._entries.values():
            record = entry.visible
            if record is not None:
                yield record

    def __iter__(self) -> Iterator[CookieRecord]:
        return self.iter()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __len__(self) -> int:
        return sum(1 for _ in self.iter())

    def __repr__(self) -> str:
        return f"CookieStore({[record.name for record in self.iter()]!r})"

    def names(self) -> list[str]:
        """Return the names of present cookies."""
        return [record.name for record in self.iter()]

    def delta(self) -> Iterator[DeltaEntry]:
        """Iterate over the changes that must be sent to the client.

        Yields:
            One DeltaEntry per ADDED, OVERWRITTEN or REMOVED name, in
            first-seen order. REMOVED entries carry the removal record.
        """
        for entry in self._entries.values():
            kind = entry.kind
            if kind is DeltaKind.UNMODIFIED:
                continue
            record = entry.removal if kind is DeltaKind.REMOVED else entry.current
            if record is None:
                raise RuntimeError(f"Cookie entry in state {kind.value} has no record")
            if kind is DeltaKind.REMOVED:
                record = record.into_removal()
            yield DeltaEntry(kind=kind, record=record)
