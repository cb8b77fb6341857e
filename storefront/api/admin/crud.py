"""
Back-office CRUD operations
One generic store per flat admin table
"""

from typing import Any, Dict, List, Optional, Sequence, Type
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_
import logging

from storefront.models import Base, Sale, Reservation, InventoryItem, utcnow
from storefront.models.admin import LOW_STOCK_THRESHOLD

logger = logging.getLogger(__name__)

class AdminCRUD:
    """List/get/create/update/delete for a flat table with substring search"""

    model: Type[Base]
    search_fields: Sequence[str] = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_multi(self, search: Optional[str] = None) -> List[Any]:
        """Newest first; search is a case-insensitive contains over search_fields"""
        query = select(self.model)

        term = (search or "").strip().lower()
        if term:
            query = query.where(or_(*[
                func.lower(func.coalesce(getattr(self.model, field), "")).contains(term, autoescape=True)
                for field in self.search_fields
            ]))

        result = await self.db.execute(
            query.order_by(self.model.created_at.desc(), self.model.id.desc())
        )
        return list(result.scalars().all())

    async def get(self, record_id: int) -> Optional[Any]:
        return await self.db.get(self.model, record_id)

    async def create(self, data: Dict[str, Any]) -> Any:
        now = utcnow()
        record = self.model(**data, created_at=now, updated_at=now)
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        logger.info(f"Created {self.model.__tablename__} #{record.id}")
        return record

    async def update(self, record_id: int, data: Dict[str, Any]) -> Optional[Any]:
        """Shallow-merge the given fields and re-stamp updated_at"""
        record = await self.get(record_id)
        if not record:
            return None

        for key, value in data.items():
            if hasattr(record, key):
                setattr(record, key, value)
        record.touch()

        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def delete(self, record_id: int) -> bool:
        record = await self.get(record_id)
        if not record:
            return False

        await self.db.delete(record)
        await self.db.commit()
        logger.info(f"Deleted {self.model.__tablename__} #{record_id}")
        return True

class SalesCRUD(AdminCRUD):
    model = Sale
    search_fields = ("customer", "item", "notes")

class ReservationCRUD(AdminCRUD):
    model = Reservation
    search_fields = ("customer", "item", "notes")

class InventoryCRUD(AdminCRUD):
    model = InventoryItem
    search_fields = ("item", "order", "type", "status", "track", "notes")

    async def summary(self) -> Dict[str, int]:
        """Row count plus low-stock and sold-out counts"""
        result = await self.db.execute(
            select(
                func.count(InventoryItem.id),
                func.count(InventoryItem.id).filter(InventoryItem.stock == LOW_STOCK_THRESHOLD),
                func.count(InventoryItem.id).filter(InventoryItem.stock == 0),
            )
        )
        total, low_stock, sold_out = result.one()
        return {"total": total, "low_stock": low_stock, "sold_out": sold_out}
