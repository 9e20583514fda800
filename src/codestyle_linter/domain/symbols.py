"""Host-neutral symbol model handed to the rules.

Gateways build these from the host syntax tree; rules never touch the tree
itself. ``syntax`` carries the host node so a diagnostic can be anchored on it
and is excluded from equality.
"""

from dataclasses import dataclass, field
from enum import Enum


class Accessibility(Enum):
    """Declared accessibility, derived from Python naming conventions."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    SPECIAL = "special"

    @classmethod
    def from_name(cls, name: str) -> "Accessibility":
        if name.startswith("__") and name.endswith("__") and len(name) > 4:
            return cls.SPECIAL
        if name.startswith("__"):
            return cls.PRIVATE
        if name.startswith("_"):
            return cls.PROTECTED
        return cls.PUBLIC


@dataclass(frozen=True)
class SourceSpan:
    """A source range; 1-based lines, 0-based columns."""

    path: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


NO_LOCATION = SourceSpan(path="", line=0, column=0)


@dataclass(frozen=True)
class AttributeUsage:
    """A decorator applied to a declaration; ``type_identity`` is None when unresolved."""

    type_identity: str | None
    syntax: object = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class BaseTypeClause:
    """One entry of a class's base list.

    ``definition`` is the qualified name of the (unbound) base, ``type_arguments``
    the qualified names of the subscript arguments in source order. Arguments
    that cannot be resolved keep their source text.
    """

    definition: str | None
    type_arguments: tuple[str, ...]
    span: SourceSpan
    syntax: object = field(default=None, compare=False, repr=False)

    @property
    def specialized_name(self) -> str:
        base = self.definition or "?"
        if not self.type_arguments:
            return base
        return f"{base}[{', '.join(self.type_arguments)}]"


@dataclass(frozen=True)
class TypeDeclaration:
    name: str
    qualified_name: str
    assembly: str
    attributes: tuple[AttributeUsage, ...] = ()
    base_types: tuple[BaseTypeClause, ...] = ()
    span: SourceSpan = NO_LOCATION
    syntax: object = field(default=None, compare=False, repr=False)

    @property
    def identity(self) -> str:
        """Allow-list identity: ``<qualified name>, <assembly display name>``."""
        return f"{self.qualified_name}, {self.assembly}"

    def has_attribute(self, type_identity: str) -> bool:
        return any(a.type_identity == type_identity for a in self.attributes)


@dataclass(frozen=True)
class MethodDeclaration:
    name: str
    accessibility: Accessibility
    containing_type: TypeDeclaration
    attributes: tuple[AttributeUsage, ...] = ()
    # the ``def name`` header: starts at the ``def`` keyword, ends after the name
    name_span: SourceSpan = NO_LOCATION
    syntax: object = field(default=None, compare=False, repr=False)
