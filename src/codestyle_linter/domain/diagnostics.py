"""Diagnostic construction: rule id, fixed severity, rendered message, span."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from codestyle_linter.domain.protocols import DiagnosticSinkProtocol
from codestyle_linter.domain.rules import Violation
from codestyle_linter.domain.symbols import SourceSpan


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def from_msgid(cls, msgid: str) -> "Severity":
        """Severity Pylint reports for ``msgid``, taken from its category letter."""
        category = msgid[:1].upper()
        if category in ("E", "F"):
            return cls.ERROR
        if category == "W":
            return cls.WARNING
        return cls.INFO


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Static description of a rule, fixed when the rule is registered."""

    code: str
    symbol: str
    severity: Severity
    message_template: str

    def render(self, args: tuple[str, ...]) -> str:
        if not args:
            return self.message_template
        return self.message_template % args


@dataclass(frozen=True)
class Diagnostic:
    descriptor: DiagnosticDescriptor
    message: str
    span: SourceSpan
    message_args: tuple[str, ...] = ()
    node: object = field(default=None, compare=False, repr=False)

    @property
    def code(self) -> str:
        return self.descriptor.code


class DiagnosticEmitter:
    """Turns violations into diagnostics and hands each one to the sink as it comes."""

    def __init__(
        self,
        descriptors: Mapping[str, DiagnosticDescriptor],
        sink: DiagnosticSinkProtocol,
    ) -> None:
        self._descriptors = dict(descriptors)
        self._sink = sink

    def build(self, violation: Violation) -> Diagnostic:
        descriptor = self._descriptors.get(violation.code)
        if descriptor is None:
            raise KeyError(f"No descriptor registered for rule {violation.code}")
        return Diagnostic(
            descriptor=descriptor,
            message=descriptor.render(violation.message_args),
            span=violation.span,
            message_args=violation.message_args,
            node=violation.node,
        )

    def emit(self, violation: Violation) -> Diagnostic:
        diagnostic = self.build(violation)
        self._sink.report(diagnostic)
        return diagnostic

    def emit_all(self, violations: Iterable[Violation]) -> list[Diagnostic]:
        return [self.emit(v) for v in violations]
