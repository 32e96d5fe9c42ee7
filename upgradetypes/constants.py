"""Shared enums and constants for upgrade targets."""

import logging
from enum import Enum
from typing import Dict, Tuple

from upgradetypes.errors import UnknownUpgradeKeyError

logger = logging.getLogger(__name__)


class UpgradeWithType(str, Enum):
    """What an upgrade applies to, keyed by its column code in the upgrade csv."""

    ABILITY = "A"
    ITEM = "I"
    WEAPON = "W"

    @property
    def csv_key(self) -> str:
        """Column code for this type in the upgrade csv."""
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "Weapon"."""
        return UPGRADE_TYPE_LABELS[self]

    @classmethod
    def csv_keys(cls) -> Tuple[str, ...]:
        """All csv keys, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def from_csv_key(cls, key: str) -> "UpgradeWithType":
        """Return the case whose csv key is exactly ``key``.

        Matching is case-sensitive. Raises UnknownUpgradeKeyError when no case
        matches; there is no default case.
        """
        try:
            return cls(key)
        except ValueError as exc:
            logger.debug("No upgrade type for csv key %r", key)
            raise UnknownUpgradeKeyError(key, cls.csv_keys()) from exc


UPGRADE_TYPE_LABELS: Dict[UpgradeWithType, str] = {
    UpgradeWithType.ABILITY: "Ability",
    UpgradeWithType.ITEM: "Item",
    UpgradeWithType.WEAPON: "Weapon",
}
