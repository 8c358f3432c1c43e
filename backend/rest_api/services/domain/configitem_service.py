"""
Configuration Item Service.

Usage:
    from rest_api.services.domain import ConfigItemService

    service = ConfigItemService(db)
    item = service.create(ConfigItemCreate(name="db-01", description="Primary database"))
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import ConfigItem
from rest_api.services.base_service import BaseCRUDService
from shared.config.constants import EntityKind
from shared.utils.schemas import ConfigItemOutput


class ConfigItemService(BaseCRUDService[ConfigItem, ConfigItemOutput]):
    """
    Service for configuration items.

    Business rules:
    - New items default to status ``inactive``
    - Deleting an item removes its changes and incident links
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=ConfigItem,
            output_schema=ConfigItemOutput,
            entity_name="Configuration item",
            kind=EntityKind.CONFIG_ITEM,
        )
