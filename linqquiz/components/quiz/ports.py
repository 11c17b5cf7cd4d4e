"""
Quiz component - Port interfaces.

Shapes of the caller-supplied family records.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class PersonPort(Protocol):
    """A person with an age."""

    @property
    def age(self) -> int: ...


class FamilyPort(Protocol):
    """A family identified by ID, holding its members."""

    @property
    def id(self) -> int: ...

    @property
    def persons(self) -> Sequence[PersonPort]: ...
