"""Row records — intermediate representation from the Reader layer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemberRow:
    """One row of a service's class table."""

    name: str
    description: str
    path: str  # detail-page link, "" when the row has none


@dataclass
class ValueRow:
    """A name / type / description row (properties, enum values, parameters)."""

    name: str
    type: str
    description: str


@dataclass
class MethodBlock:
    """Everything the detail page says about one method."""

    heading: str
    summary: str = ""
    example: str = ""
    return_text: str = ""
    params: list[ValueRow] = field(default_factory=list)
    advanced_params: list[ValueRow] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Method name without the signature, e.g. ``setOptions``."""
        return self.heading.split("(", 1)[0].strip()
