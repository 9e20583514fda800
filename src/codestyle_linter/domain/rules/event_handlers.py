"""Disallowed handler specialization rule (W9502)."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from codestyle_linter.domain.constants import EVENT_HANDLER_DISALLOWED
from codestyle_linter.domain.rules import Violation
from codestyle_linter.domain.symbols import BaseTypeClause
from codestyle_linter.domain.vocabulary import HandlerInterfaceTypes


@dataclass(frozen=True)
class DisallowedArguments:
    """Qualified names and namespaces a handler may not be specialized with.

    An entry matches the name itself and anything below it on a dotted
    boundary: ``events.external`` matches ``events.external.Clicked`` but not
    ``events.externals.Clicked``.
    """

    entries: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, names: Iterable[str]) -> "DisallowedArguments":
        return cls(frozenset(n.strip() for n in names if n.strip()))

    def matches(self, qualified_name: str) -> bool:
        return any(
            qualified_name == entry or qualified_name.startswith(entry + ".")
            for entry in self.entries
        )


class EventHandlerDisallowedRule:
    """Rule for W9502 (event-handler-disallowed).

    Judges one base clause at a time. A class implementing the same handler
    shape twice with two disallowed arguments gets two violations, each
    anchored at its clause, in source order.
    """

    code: str = EVENT_HANDLER_DISALLOWED

    def check_clause(
        self,
        clause: BaseTypeClause,
        types: HandlerInterfaceTypes,
        disallowed: DisallowedArguments,
    ) -> Violation | None:
        if not types.is_tracked(clause.definition):
            return None
        if not any(disallowed.matches(arg) for arg in clause.type_arguments):
            return None
        specialized = clause.specialized_name
        return Violation(
            code=self.code,
            span=clause.span,
            node=clause.syntax,
            message_args=(specialized,),
        )
