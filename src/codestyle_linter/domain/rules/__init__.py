"""Domain models for rules and violations."""

from dataclasses import dataclass, field

__all__ = [
    "Violation",
]

from codestyle_linter.domain.symbols import SourceSpan


@dataclass(frozen=True)
class Violation:
    """A rule violation: the rule code and the anchor it is reported at."""

    code: str
    span: SourceSpan
    node: object = field(default=None, compare=False, repr=False)
    message_args: tuple[str, ...] = ()
    """Args for the registry message template (Pylint add_message args)."""
