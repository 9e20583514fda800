"""Capabilities the host must provide to the convention engine."""

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from codestyle_linter.domain.diagnostics import Diagnostic
    from codestyle_linter.domain.symbols import MethodDeclaration, TypeDeclaration


class TypeResolverProtocol(Protocol):
    """Resolve a fully-qualified type name against the program under analysis."""

    def resolve_type(self, qualified_name: str) -> Optional[str]:
        """Return the type identity, or None when the type is not available."""
        ...


class SymbolGatewayProtocol(Protocol):
    """Build host-neutral declarations from host syntax nodes."""

    def method_declaration(self, node: object) -> Optional["MethodDeclaration"]:
        ...

    def type_declaration(self, node: object) -> Optional["TypeDeclaration"]:
        ...


class AdditionalFileProtocol(Protocol):
    """A named text resource supplied next to the sources."""

    @property
    def path(self) -> str:
        ...

    def get_text(self) -> str:
        ...


class DiagnosticSinkProtocol(Protocol):
    def report(self, diagnostic: "Diagnostic") -> None:
        ...
