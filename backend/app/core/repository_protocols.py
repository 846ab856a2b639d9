"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the core functions that produce
      changesets are never async — the shell orchestrates IO around the pure logic
"""

from typing import Protocol

from app.core.domain_types import ProfileId
from app.core.profile_record import ProfileRecord
from app.core.profile_store import Changeset


class ProfileRepository(Protocol):
    """Contract for profile persistence — implemented by shell."""
    async def load_all(self) -> list[ProfileRecord]: ...
    async def apply_changes(self, changes: Changeset) -> None: ...


class IdGenerator(Protocol):
    """Contract for fresh, collision-resistant profile ids."""
    def __call__(self) -> ProfileId: ...
