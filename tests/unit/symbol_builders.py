"""Builders for host-neutral declarations used by domain and use-case tests."""

from codestyle_linter.domain.symbols import (
    Accessibility,
    AttributeUsage,
    BaseTypeClause,
    MethodDeclaration,
    SourceSpan,
    TypeDeclaration,
)
from codestyle_linter.domain.vocabulary import HandlerInterfaceTypes, TestFrameworkTypes

FIXTURE = "nunit.framework.TestFixture"
TEST = "nunit.framework.Test"
TEST_CASE = "nunit.framework.TestCase"
SETUP = "nunit.framework.SetUp"
TEARDOWN = "nunit.framework.TearDown"

EVENT_HANDLER = "distributed.events.handlers.IEventHandler"
ORG_EVENT_HANDLER = "distributed.events.handlers.IOrgEventHandler"
EXTERNAL = "distributed.events.external_publish"
CLICKED = "distributed.events.external_publish.user_interaction.Clicked"
VIEWED = "distributed.events.external_publish.user_interaction.Viewed"

TEST_TYPES = TestFrameworkTypes(
    fixture_marker=FIXTURE,
    test_markers=frozenset({TEST, TEST_CASE}),
    setup_teardown_markers=frozenset({SETUP, TEARDOWN}),
)
HANDLER_TYPES = HandlerInterfaceTypes(interfaces=frozenset({EVENT_HANDLER, ORG_EVENT_HANDLER}))


def span(line: int, column: int = 4) -> SourceSpan:
    return SourceSpan(path="myproject/tests/test_widgets.py", line=line, column=column)


def type_decl(
    name: str = "WidgetTests",
    *attributes: str,
    module: str = "myproject.tests.test_widgets",
    bases: tuple[BaseTypeClause, ...] = (),
) -> TypeDeclaration:
    return TypeDeclaration(
        name=name,
        qualified_name=f"{module}.{name}",
        assembly=module.split(".")[0],
        attributes=tuple(AttributeUsage(a) for a in attributes),
        base_types=bases,
        span=span(1, 0),
    )


def method(
    name: str,
    *attributes: str | None,
    containing_type: TypeDeclaration | None = None,
    line: int = 3,
) -> MethodDeclaration:
    return MethodDeclaration(
        name=name,
        accessibility=Accessibility.from_name(name),
        containing_type=containing_type or type_decl("WidgetTests", FIXTURE),
        attributes=tuple(AttributeUsage(a) for a in attributes),
        name_span=span(line),
        syntax=f"<def {name}>",
    )


def clause(definition: str | None, *arguments: str, line: int = 1, column: int = 0) -> BaseTypeClause:
    return BaseTypeClause(
        definition=definition,
        type_arguments=tuple(arguments),
        span=span(line, column),
        syntax=f"<clause {column}>",
    )
