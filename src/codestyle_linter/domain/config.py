"""Configuration for the convention rules. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from codestyle_linter.domain.constants import (
    ALLOW_LIST_FILE_NAME,
    DEFAULT_DISALLOWED_HANDLER_ARGUMENTS,
    DEFAULT_FIXTURE_MARKER,
    DEFAULT_HANDLER_INTERFACES,
    DEFAULT_SETUP_TEARDOWN_MARKERS,
    DEFAULT_TEST_MARKERS,
)


class ConfigurationLoader:
    """
    Immutable configuration for linter settings.

    Created by Infrastructure from the [tool.codestyle-linter] table. Domain does
    not read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict) at composition root.
    """

    def __init__(self, config_dict: dict[str, object]) -> None:
        self._config = config_dict

    def _str_value(self, key: str, default: str) -> str:
        raw = self._config.get(key, default)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
        logging.warning(
            "Configuration Warning: '%s' must be a non-empty string; using %r.", key, default
        )
        return default

    def _str_list(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        raw = self._config.get(key)
        if raw is None:
            return default
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, (list, tuple)):
            logging.warning(
                "Configuration Warning: '%s' must be a list of strings; using defaults.", key
            )
            return default
        return tuple(str(x).strip() for x in raw if isinstance(x, str) and x.strip())

    # Required marker rule (W9501)

    @property
    def fixture_marker(self) -> str:
        return self._str_value("fixture_marker", DEFAULT_FIXTURE_MARKER)

    @property
    def test_markers(self) -> tuple[str, ...]:
        return self._str_list("test_markers", DEFAULT_TEST_MARKERS)

    @property
    def setup_teardown_markers(self) -> tuple[str, ...]:
        return self._str_list("setup_teardown_markers", DEFAULT_SETUP_TEARDOWN_MARKERS)

    @property
    def allow_list_file_name(self) -> str:
        return self._str_value("allow_list_file_name", ALLOW_LIST_FILE_NAME)

    @property
    def additional_files(self) -> tuple[str, ...]:
        """Paths of additional text resources (allow-lists), relative to the working directory."""
        return self._str_list("additional_files", ())

    # Handler specialization rule (W9502)

    @property
    def handler_interfaces(self) -> tuple[str, ...]:
        return self._str_list("handler_interfaces", DEFAULT_HANDLER_INTERFACES)

    @property
    def disallowed_handler_arguments(self) -> tuple[str, ...]:
        return self._str_list(
            "disallowed_handler_arguments", DEFAULT_DISALLOWED_HANDLER_ARGUMENTS
        )
