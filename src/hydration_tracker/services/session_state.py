"""In-memory state container for today's log entries."""

from dataclasses import dataclass, field

from hydration_tracker.domain.logs import LogEntry, SessionTotals, percentage_of_goal


@dataclass
class SessionState:
    """Newest-first list of today's entries.

    The controller is the only mutator; no validation happens here.
    """

    _entries: list[LogEntry] = field(default_factory=list)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Return a snapshot of the current entries."""
        return tuple(self._entries)

    @property
    def total_ml(self) -> int:
        return sum(entry.amount_ml for entry in self._entries)

    def totals(self, goal_ml: int) -> SessionTotals:
        """Return derived totals against a goal."""
        return SessionTotals(total_ml=self.total_ml, goal_ml=goal_ml)

    def percentage(self, goal_ml: int) -> int:
        return percentage_of_goal(self.total_ml, goal_ml)

    def find(self, entry_id: str) -> LogEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def provisional_entries(self) -> list[LogEntry]:
        """Return entries still waiting for store confirmation."""
        return [entry for entry in self._entries if entry.is_provisional]

    def replace_all(self, entries: list[LogEntry]) -> None:
        self._entries = list(entries)

    def prepend(self, entry: LogEntry) -> None:
        self._entries = [entry, *self._entries]

    def replace(self, entry_id: str, entry: LogEntry) -> bool:
        """Replace an entry in place, keeping its position."""
        for index, current in enumerate(self._entries):
            if current.id == entry_id:
                updated = list(self._entries)
                updated[index] = entry
                self._entries = updated
                return True
        return False

    def remove(self, entry_id: str) -> tuple[int, LogEntry] | None:
        """Remove an entry and return its former index and value."""
        for index, current in enumerate(self._entries):
            if current.id == entry_id:
                self._entries = self._entries[:index] + self._entries[index + 1 :]
                return index, current
        return None

    def clear(self) -> list[LogEntry]:
        """Empty the list and return what it held."""
        snapshot = self._entries
        self._entries = []
        return list(snapshot)

    def restore(self, snapshot: list[LogEntry]) -> None:
        self._entries = list(snapshot)
