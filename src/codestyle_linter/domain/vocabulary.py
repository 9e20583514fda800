"""Well-known type cache: the vocabulary the convention rules are written in.

Each configured name resolves once per run to ``Resolved`` or ``Unavailable``.
A rule family is only enabled when its vocabulary is ``Complete``; a project
that does not reference the framework at all gets ``Incomplete`` and the family
stays silent for the whole run.
"""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from codestyle_linter.domain.protocols import TypeResolverProtocol

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Resolved:
    name: str
    identity: str


@dataclass(frozen=True)
class Unavailable:
    name: str


Resolution = Union[Resolved, Unavailable]


@dataclass(frozen=True)
class Complete(Generic[T]):
    types: T


@dataclass(frozen=True)
class Incomplete:
    missing: tuple[str, ...]


Vocabulary = Union[Complete[T], Incomplete]


@dataclass(frozen=True)
class TestFrameworkTypes:
    """Resolved identities for the required-marker rule family."""

    __test__ = False

    fixture_marker: str
    test_markers: frozenset[str]
    setup_teardown_markers: frozenset[str]

    def is_lifecycle_marker(self, identity: str | None) -> bool:
        """True when ``identity`` marks a test or a setup/teardown method."""
        if identity is None:
            return False
        return identity in self.test_markers or identity in self.setup_teardown_markers


@dataclass(frozen=True)
class HandlerInterfaceTypes:
    """Resolved generic definitions of the tracked handler interfaces."""

    interfaces: frozenset[str]

    def is_tracked(self, definition: str | None) -> bool:
        return definition is not None and definition in self.interfaces


class VocabularyResolver:
    """Resolves configured names through a ``TypeResolverProtocol``."""

    def __init__(self, resolver: TypeResolverProtocol) -> None:
        self._resolver = resolver

    def resolve(self, name: str) -> Resolution:
        identity = self._resolver.resolve_type(name)
        if identity is None:
            return Unavailable(name)
        return Resolved(name, identity)

    def resolve_all(self, names: tuple[str, ...]) -> tuple[Resolution, ...]:
        return tuple(self.resolve(n) for n in names)

    def resolve_test_framework(
        self,
        fixture_marker: str,
        test_markers: tuple[str, ...],
        setup_teardown_markers: tuple[str, ...],
    ) -> "Vocabulary[TestFrameworkTypes]":
        """Fixture marker and at least one test marker are required."""
        fixture = self.resolve(fixture_marker)
        tests = self.resolve_all(test_markers)
        lifecycle = self.resolve_all(setup_teardown_markers)

        resolved_tests = frozenset(r.identity for r in tests if isinstance(r, Resolved))
        if isinstance(fixture, Resolved) and resolved_tests:
            return Complete(
                TestFrameworkTypes(
                    fixture_marker=fixture.identity,
                    test_markers=resolved_tests,
                    setup_teardown_markers=frozenset(
                        r.identity for r in lifecycle if isinstance(r, Resolved)
                    ),
                )
            )

        missing: list[str] = []
        if isinstance(fixture, Unavailable):
            missing.append(fixture.name)
        if not resolved_tests:
            missing.extend(r.name for r in tests)
        _logger.debug("Test framework vocabulary incomplete, missing: %s", missing)
        return Incomplete(tuple(missing))

    def resolve_handler_interfaces(
        self, interfaces: tuple[str, ...]
    ) -> "Vocabulary[HandlerInterfaceTypes]":
        """At least one handler interface is required."""
        resolutions = self.resolve_all(interfaces)
        resolved = frozenset(r.identity for r in resolutions if isinstance(r, Resolved))
        if not resolved:
            missing = tuple(r.name for r in resolutions)
            _logger.debug("Handler interface vocabulary incomplete, missing: %s", missing)
            return Incomplete(missing)
        return Complete(HandlerInterfaceTypes(interfaces=resolved))
