"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

from collections.abc import Mapping
from typing import cast

from codestyle_linter.domain.constants import CODESTYLE_PREFIX
from codestyle_linter.domain.diagnostics import DiagnosticDescriptor, Severity
from codestyle_linter.domain.registry_types import RuleRegistryEntry


class RuleMsgBuilder:
    """Builds Pylint msgs dicts and diagnostic descriptors from a registry mapping."""

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry for a rule by code or symbol."""
        entry = registry.get(f"{CODESTYLE_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for rid, e in registry.items():
            if not rid.startswith(CODESTYLE_PREFIX):
                continue
            if isinstance(e, dict) and e.get("symbol") == rule_code:
                return cast(RuleRegistryEntry, dict(e))
        return None

    @staticmethod
    def build_msgs_for_codes(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict for given rule codes.

        Registry keys are e.g. 'codestyle.W9501'. Returns
        { code: (message_template, symbol, description) } for checker.msgs.
        The description carries the manual instructions when the entry has them.
        """
        result: dict[str, tuple[str, str, str]] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if entry and entry.get("message_template"):
                msg = entry["message_template"]
                symbol = entry.get("symbol") or code
                desc = (
                    entry.get("display_name")
                    or entry.get("short_description")
                    or code
                )
                # shown by pylint --help-msg
                if entry.get("manual_instructions"):
                    desc = f"{desc}. {entry['manual_instructions']}"
                result[code] = (str(msg), str(symbol), str(desc))
        return result

    @staticmethod
    def build_descriptors(
        registry: Mapping[str, RuleRegistryEntry], codes: list[str]
    ) -> dict[str, DiagnosticDescriptor]:
        """Build one DiagnosticDescriptor per code; severity follows the msgid category."""
        result: dict[str, DiagnosticDescriptor] = {}
        for code in codes:
            entry = RuleMsgBuilder.get_entry(registry, code)
            if not entry or not entry.get("message_template"):
                continue
            result[code] = DiagnosticDescriptor(
                code=code,
                symbol=str(entry.get("symbol") or code),
                severity=Severity.from_msgid(code),
                message_template=str(entry["message_template"]),
            )
        return result
