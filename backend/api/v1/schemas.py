"""
Pydantic schemas for upgrade type endpoints.
"""

from pydantic import BaseModel

from upgradetypes.constants import UpgradeWithType


class UpgradeTypeOut(BaseModel):
    name: str
    csv_key: str
    label: str

    @classmethod
    def from_type(cls, upgrade_type: UpgradeWithType) -> "UpgradeTypeOut":
        return cls(name=upgrade_type.name, csv_key=upgrade_type.csv_key, label=upgrade_type.label)


class UpgradeTypeCatalog(BaseModel):
    types: list[UpgradeTypeOut]
    count: int
