"""Allow-list of type identities exempted from the required-marker rule."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import PurePath

from codestyle_linter.domain.constants import ALLOW_LIST_FILE_NAME
from codestyle_linter.domain.protocols import AdditionalFileProtocol

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllowList:
    """
    Immutable set of ``<qualified name>, <assembly display name>`` entries.

    Entries are not validated: a malformed line never equals a real identity,
    so it is inert.
    """

    entries: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, identity: object) -> bool:
        return identity in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def contains(self, identity: str) -> bool:
        return identity in self.entries

    @classmethod
    def empty(cls) -> "AllowList":
        return cls()

    @classmethod
    def parse(cls, text: str) -> "AllowList":
        """One entry per line; surrounding whitespace trimmed, blank lines ignored."""
        entries = {line.strip() for line in text.splitlines()}
        entries.discard("")
        return cls(frozenset(entries))

    @classmethod
    def load(
        cls,
        additional_files: Iterable[AdditionalFileProtocol],
        file_name: str = ALLOW_LIST_FILE_NAME,
    ) -> "AllowList":
        """
        Parse the first additional file whose base name is exactly ``file_name``.

        No such file means an empty allow-list. Read errors propagate to the host.
        """
        for additional_file in additional_files:
            if PurePath(additional_file.path).name != file_name:
                continue
            allow_list = cls.parse(additional_file.get_text())
            _logger.debug(
                "Loaded %d allow-list entries from %s", len(allow_list), additional_file.path
            )
            return allow_list
        return cls.empty()
