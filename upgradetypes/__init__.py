"""Upgrade target types and their csv keys."""

from upgradetypes.constants import UPGRADE_TYPE_LABELS, UpgradeWithType
from upgradetypes.errors import UnknownUpgradeKeyError, UpgradeTypeError

__all__ = ["UpgradeWithType", "UPGRADE_TYPE_LABELS", "UpgradeTypeError", "UnknownUpgradeKeyError"]
