# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Team member collection store.
Holds the ordered, immutable roster snapshot and its single mutator.
NO validation here: every candidate is accepted as-is.
"""

import time
from typing import Callable, Iterable, Mapping, Optional, Union

from team_builder.models.domain import Draft, TeamMember

Snapshot = tuple[TeamMember, ...]
Listener = Callable[[Snapshot], None]


class CollectionStore:
    """In-memory roster. Every append replaces the snapshot wholesale."""

    def __init__(
        self,
        initial: Iterable[TeamMember] = (),
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._clock = clock
        self._listeners: list[Listener] = []
        self._members: Snapshot = ()
        self._last_id = 0
        self._last_appended: Optional[TeamMember] = None
        self.reset(initial)

    # ── Read ──

    @property
    def members(self) -> Snapshot:
        return self._members

    def count(self) -> int:
        return len(self._members)

    @property
    def last_appended(self) -> Optional[TeamMember]:
        return self._last_appended

    # ── Write ──

    def append(self, candidate: Union[Draft, Mapping[str, str]]) -> None:
        """Assign a fresh id, build a TeamMember and publish the new snapshot.

        The candidate is a Draft or a plain {name, email, role} mapping.
        """
        if not isinstance(candidate, Mapping):
            candidate = {"name": candidate.name, "email": candidate.email, "role": candidate.role}
        member = TeamMember(
            id=self._next_id(),
            name=candidate["name"],
            email=candidate["email"],
            role=candidate["role"],
        )
        self._members = self._members + (member,)
        self._last_appended = member
        self._publish()

    # ── Subscriptions ──

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new snapshot. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── Bulk / internal ──

    def reset(self, initial: Iterable[TeamMember] = ()) -> None:
        """Replace the roster with a new seed. Ids handed out so far are never reused."""
        self._members = tuple(initial)
        self._last_id = max([self._last_id] + [m.id for m in self._members])
        self._last_appended = None
        self._publish()

    def _next_id(self) -> int:
        # Millisecond clock, bumped when it does not advance past the last id.
        candidate = int(self._clock() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    def _publish(self) -> None:
        snapshot = self._members
        for listener in list(self._listeners):
            listener(snapshot)
