"""Declaration tables for a single service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .model import MemberDeclaration, OptionsType

logger = logging.getLogger(__name__)


@dataclass
class Environment:
    """Holds all declarations produced while building one service.

    ``members`` is keyed by detail-page path and keeps listing order.
    ``options`` maps an owner path to the option types lifted from it, one
    per lift and in lift order; overloads sharing a method name each keep
    their own entry.
    """

    members: dict[str, MemberDeclaration] = field(default_factory=dict)
    options: dict[str, list[OptionsType]] = field(default_factory=dict)

    # -- Members --------------------------------------------------------

    def register_member(self, path: str, decl: MemberDeclaration) -> None:
        if path in self.members:
            logger.warning(
                "Duplicate detail path %s: %s replaces %s",
                path, decl.name, self.members[path].name,
            )
        self.members[path] = decl

    def resolve_member(self, path: str) -> MemberDeclaration | None:
        return self.members.get(path)

    def replace_member(self, path: str, decl: MemberDeclaration) -> None:
        """Swap the declaration stored at *path*, keeping its position."""
        if path not in self.members:
            raise KeyError(path)
        self.members[path] = decl

    # -- Options --------------------------------------------------------

    def register_options(self, owner: str, options: OptionsType) -> None:
        self.options.setdefault(owner, []).append(options)

    def clear_options(self, owner: str) -> None:
        """Drop *owner*'s option types before it is populated again.

        The owner keeps its slot, so its next lifts land where the old ones were.
        """
        if owner in self.options:
            self.options[owner] = []

    def option_types(self) -> list[OptionsType]:
        return [options for lifted in self.options.values() for options in lifted]

    # -- Output ---------------------------------------------------------

    def declarations(self) -> list[MemberDeclaration | OptionsType]:
        """Members in discovery order, then option types in lift order."""
        return [*self.members.values(), *self.option_types()]
