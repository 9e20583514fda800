"""Rule codes and default convention vocabulary."""

CODESTYLE_PREFIX: str = "codestyle."

TEST_ATTRIBUTE_MISSED: str = "W9501"
EVENT_HANDLER_DISALLOWED: str = "W9502"

# Matched against the base name of each additional file, case-sensitive.
ALLOW_LIST_FILE_NAME: str = "TestAttributeAnalyzerDisallowedList.txt"

DEFAULT_FIXTURE_MARKER: str = "nunit.framework.TestFixture"

DEFAULT_TEST_MARKERS: tuple[str, ...] = (
    "nunit.framework.Test",
    "nunit.framework.TestCase",
    "nunit.framework.TestCaseSource",
    "nunit.framework.Theory",
)

DEFAULT_SETUP_TEARDOWN_MARKERS: tuple[str, ...] = (
    "nunit.framework.SetUp",
    "nunit.framework.OneTimeSetUp",
    "nunit.framework.TearDown",
    "nunit.framework.OneTimeTearDown",
)

DEFAULT_HANDLER_INTERFACES: tuple[str, ...] = (
    "distributed.events.handlers.IEventHandler",
    "distributed.events.handlers.IOrgEventHandler",
)

# Namespaces (module prefixes) or exact qualified names.
DEFAULT_DISALLOWED_HANDLER_ARGUMENTS: tuple[str, ...] = (
    "distributed.events.external_publish",
)
