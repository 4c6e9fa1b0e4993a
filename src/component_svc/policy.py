"""Visibility (hide) policy for catalog and locale entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True, slots=True)
class VisibilityPolicy:
    """
    Operator-configured deny-list of fully-qualified identities.

    Two forms share one set:
    - catalog entries: ``<source>/<domain>/<name>:<version>``
    - locale entries:  ``<app>/<locale key>``

    Membership is an exact string match, no wildcards.
    """
    hidden: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_iterable(cls, entries: Iterable[str] | None) -> VisibilityPolicy:
        return cls(hidden=frozenset(entries or ()))

    def is_hidden(self, identity: str) -> bool:
        return identity in self.hidden

    def is_locale_hidden(self, app: str, key: str) -> bool:
        return f"{app}/{key}" in self.hidden

    def __contains__(self, identity: object) -> bool:
        return identity in self.hidden

    def __len__(self) -> int:
        return len(self.hidden)
