"""
API Router for upgrade types.
"""

import logging

from fastapi import APIRouter, HTTPException

from backend.api.v1.schemas import UpgradeTypeCatalog, UpgradeTypeOut
from upgradetypes.constants import UpgradeWithType
from upgradetypes.errors import UnknownUpgradeKeyError

logger = logging.getLogger(__name__)

api_router = APIRouter()


@api_router.get("/upgrade-types", response_model=UpgradeTypeCatalog, tags=["Upgrade types"])
async def list_upgrade_types():
    types = [UpgradeTypeOut.from_type(upgrade_type) for upgrade_type in UpgradeWithType]
    return {"types": types, "count": len(types)}


@api_router.get("/upgrade-types/{csv_key}", response_model=UpgradeTypeOut, tags=["Upgrade types"])
async def get_upgrade_type(csv_key: str):
    try:
        upgrade_type = UpgradeWithType.from_csv_key(csv_key)
    except UnknownUpgradeKeyError as exc:
        logger.info("Rejected upgrade type lookup for key %r", csv_key)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return UpgradeTypeOut.from_type(upgrade_type)
