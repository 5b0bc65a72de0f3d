from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple


class ReasonSet:
    """
    Insertion-ordered collection of reason strings.
    Re-adding a reason that is already present is a no-op, so the first
    triggering rule fixes its position in the output.
    """

    def __init__(self, reasons: Iterable[str] = ()):
        self._order: List[str] = []
        self._seen = set()
        for r in reasons:
            self.add(r)

    def add(self, reason: str) -> bool:
        if reason in self._seen:
            return False
        self._seen.add(reason)
        self._order.append(reason)
        return True

    def __contains__(self, reason: object) -> bool:
        return reason in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._order)
