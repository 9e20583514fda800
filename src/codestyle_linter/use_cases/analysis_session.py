"""Compilation-scoped analysis session.

Built once when the host starts a run, then shared read-only by every
per-declaration evaluation of that run. Nothing in here mutates after
``start`` returns, so concurrent evaluations need no locking.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from codestyle_linter.domain.allow_list import AllowList
from codestyle_linter.domain.config import ConfigurationLoader
from codestyle_linter.domain.errors import AnalysisCancelled
from codestyle_linter.domain.protocols import AdditionalFileProtocol, TypeResolverProtocol
from codestyle_linter.domain.rules import Violation
from codestyle_linter.domain.rules.event_handlers import (
    DisallowedArguments,
    EventHandlerDisallowedRule,
)
from codestyle_linter.domain.rules.test_attribute import TestAttributeMissedRule
from codestyle_linter.domain.symbols import MethodDeclaration, TypeDeclaration
from codestyle_linter.domain.vocabulary import (
    Complete,
    HandlerInterfaceTypes,
    Incomplete,
    TestFrameworkTypes,
    Vocabulary,
    VocabularyResolver,
)

_logger = logging.getLogger(__name__)


class CancellationToken:
    """Cooperative cancellation signal set by the host."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise AnalysisCancelled()


@dataclass(frozen=True)
class AnalysisSession:
    """Resolved vocabularies, allow-list and disallowed set for one run."""

    test_framework: "Vocabulary[TestFrameworkTypes]"
    handler_interfaces: "Vocabulary[HandlerInterfaceTypes]"
    allow_list: AllowList = field(default_factory=AllowList.empty)
    disallowed: DisallowedArguments = field(default_factory=DisallowedArguments)

    _test_rule = TestAttributeMissedRule()
    _handler_rule = EventHandlerDisallowedRule()

    @classmethod
    def start(
        cls,
        resolver: TypeResolverProtocol,
        additional_files: Iterable[AdditionalFileProtocol],
        config_loader: ConfigurationLoader,
    ) -> "AnalysisSession":
        """Resolve the vocabulary and load the allow-list once for the run."""
        vocabulary = VocabularyResolver(resolver)
        test_framework = vocabulary.resolve_test_framework(
            config_loader.fixture_marker,
            config_loader.test_markers,
            config_loader.setup_teardown_markers,
        )
        handler_interfaces = vocabulary.resolve_handler_interfaces(
            config_loader.handler_interfaces
        )

        allow_list = AllowList.empty()
        if isinstance(test_framework, Complete):
            allow_list = AllowList.load(additional_files, config_loader.allow_list_file_name)
        else:
            _logger.debug("Required marker rule disabled for this run")
        if isinstance(handler_interfaces, Incomplete):
            _logger.debug("Handler specialization rule disabled for this run")

        return cls(
            test_framework=test_framework,
            handler_interfaces=handler_interfaces,
            allow_list=allow_list,
            disallowed=DisallowedArguments.of(config_loader.disallowed_handler_arguments),
        )

    @property
    def test_rules_enabled(self) -> bool:
        return isinstance(self.test_framework, Complete)

    @property
    def handler_rules_enabled(self) -> bool:
        return isinstance(self.handler_interfaces, Complete)

    def evaluate_method(
        self,
        method: MethodDeclaration,
        token: CancellationToken | None = None,
    ) -> list[Violation]:
        if not isinstance(self.test_framework, Complete):
            return []
        if token is not None:
            token.raise_if_cancelled()
        return self._test_rule.check(method, self.test_framework.types, self.allow_list)

    def evaluate_type(
        self,
        type_decl: TypeDeclaration,
        token: CancellationToken | None = None,
    ) -> list[Violation]:
        """Judge every base clause; a cancellation part-way through reports nothing."""
        if not isinstance(self.handler_interfaces, Complete):
            return []
        if token is not None:
            token.raise_if_cancelled()
        types = self.handler_interfaces.types
        violations: list[Violation] = []
        for clause in type_decl.base_types:
            if token is not None:
                token.raise_if_cancelled()
            violation = self._handler_rule.check_clause(clause, types, self.disallowed)
            if violation is not None:
                violations.append(violation)
        return violations
