"""Convention checks (W9501, W9502)."""

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from codestyle_linter.domain.config import ConfigurationLoader
from codestyle_linter.domain.constants import EVENT_HANDLER_DISALLOWED, TEST_ATTRIBUTE_MISSED
from codestyle_linter.domain.diagnostics import Diagnostic, DiagnosticEmitter
from codestyle_linter.domain.errors import AnalysisCancelled
from codestyle_linter.domain.protocols import (
    AdditionalFileProtocol,
    SymbolGatewayProtocol,
    TypeResolverProtocol,
)
from codestyle_linter.domain.registry_types import RuleRegistryEntry
from codestyle_linter.domain.rule_msgs import RuleMsgBuilder
from codestyle_linter.use_cases.analysis_session import AnalysisSession, CancellationToken

_logger = logging.getLogger(__name__)


class PylintDiagnosticSink:
    """Forwards each diagnostic to the checker's add_message as soon as it is built."""

    def __init__(self, checker: BaseChecker) -> None:
        self._checker = checker

    def report(self, diagnostic: Diagnostic) -> None:
        self._checker.add_message(
            diagnostic.code,
            node=diagnostic.node,
            args=diagnostic.message_args or (),
        )


class ConventionChecker(BaseChecker):
    """W9501, W9502: project conventions. Thin: delegates to AnalysisSession.

    The session is built in open(), once per run; when a rule family's
    vocabulary cannot be resolved its visits do nothing for the whole run.
    Once the cancellation token is set, each remaining visit is abandoned
    without reporting.
    """

    name: str = "codestyle-conventions"
    CODES = [TEST_ATTRIBUTE_MISSED, EVENT_HANDLER_DISALLOWED]

    def __init__(
        self,
        linter: "PyLinter",
        symbol_gateway: SymbolGatewayProtocol,
        type_resolver: TypeResolverProtocol,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
        additional_files: Sequence[AdditionalFileProtocol] = (),
        cancellation_token: CancellationToken | None = None,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self._symbol_gateway = symbol_gateway
        self._type_resolver = type_resolver
        self._config_loader = config_loader
        self._additional_files = tuple(additional_files)
        self._token = cancellation_token or CancellationToken()
        self._emitter = DiagnosticEmitter(
            RuleMsgBuilder.build_descriptors(registry, self.CODES),
            PylintDiagnosticSink(self),
        )
        self._session: AnalysisSession | None = None

    @property
    def session(self) -> AnalysisSession | None:
        return self._session

    @property
    def cancellation_token(self) -> CancellationToken:
        return self._token

    def open(self) -> None:
        """Compilation start: resolve vocabulary and load the allow-list."""
        self._session = AnalysisSession.start(
            self._type_resolver,
            self._additional_files,
            self._config_loader,
        )

    def close(self) -> None:
        self._session = None

    def visit_functiondef(self, node: astroid.nodes.FunctionDef) -> None:
        """Delegate W9501 to the session; report each violation."""
        session = self._session
        if session is None or not session.test_rules_enabled:
            return
        method = self._symbol_gateway.method_declaration(node)
        if method is None:
            return
        try:
            violations = session.evaluate_method(method, self._token)
        except AnalysisCancelled:
            _logger.debug("Evaluation of %s cancelled", node.name)
            return
        self._emitter.emit_all(violations)

    visit_asyncfunctiondef = visit_functiondef

    def visit_classdef(self, node: astroid.nodes.ClassDef) -> None:
        """Delegate W9502 to the session; report each violation."""
        session = self._session
        if session is None or not session.handler_rules_enabled:
            return
        type_decl = self._symbol_gateway.type_declaration(node)
        if type_decl is None:
            return
        try:
            violations = session.evaluate_type(type_decl, self._token)
        except AnalysisCancelled:
            _logger.debug("Evaluation of %s cancelled", node.name)
            return
        self._emitter.emit_all(violations)
