"""
Keyed enter/update/exit reconciliation between two renders
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class Reconciliation:
    enter: Tuple[str, ...] = ()
    update: Tuple[str, ...] = ()
    exit: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.enter or self.update or self.exit)


def _unique(ids: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out


def reconcile(previous_ids: Iterable[str], current_ids: Iterable[str]) -> Reconciliation:
    """
    Match the previously drawn ids against the current ones.

    A point keeps its identity across renders only through its id, so a
    respondent whose coordinates change is an update (a migration), not an
    exit followed by an enter.

    Returns:
        Reconciliation with enter/update in current order and exit in previous order
    """
    previous = _unique(previous_ids)
    current = _unique(current_ids)
    previous_set = set(previous)
    current_set = set(current)

    return Reconciliation(
        enter=tuple(i for i in current if i not in previous_set),
        update=tuple(i for i in current if i in previous_set),
        exit=tuple(i for i in previous if i not in current_set),
    )
