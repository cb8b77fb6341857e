"""Admin back-office endpoints"""

from typing import List, Optional, Type
from fastapi import APIRouter, Depends, Path, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.database import get_db
from storefront.core.security import require_admin
from storefront.core.exceptions import NotFoundException
from storefront.middleware.rate_limit import auth_limiter
from storefront.services.reward_service import RewardService
from storefront.schemas.base import MessageResponse, BaseSchema, MAX_DB_INT
from storefront.schemas.game import RewardResponse, RewardUpdate
from storefront.schemas.admin import (
    AdminLoginRequest,
    AdminLoginResponse,
    SaleCreate,
    SaleUpdate,
    SaleResponse,
    ReservationCreate,
    ReservationUpdate,
    ReservationResponse,
    InventoryCreate,
    InventoryUpdate,
    InventoryResponse,
    InventorySummary,
)
from .crud import AdminCRUD, SalesCRUD, ReservationCRUD, InventoryCRUD
from .services import AdminAuthService

router = APIRouter()

# Everything except login requires an admin bearer token
protected = APIRouter(dependencies=[Depends(require_admin)])

@router.post("/login", response_model=AdminLoginResponse)
@auth_limiter
async def admin_login(
    request: Request,
    login_data: AdminLoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """Exchange admin credentials for a bearer token"""
    return await AdminAuthService(db).login(login_data.username, login_data.password)

@protected.get("/inventory/summary", response_model=InventorySummary)
async def get_inventory_summary(db: AsyncSession = Depends(get_db)):
    """Inventory counts for the dashboard"""
    return await InventoryCRUD(db).summary()

def register_crud_routes(
    target: APIRouter,
    path: str,
    crud_class: Type[AdminCRUD],
    create_schema: Type[BaseSchema],
    update_schema: Type[BaseSchema],
    response_schema: Type[BaseSchema],
    label: str,
) -> None:
    """List/get/create/update/delete endpoints for one back-office table"""
    tag = path.strip("/")

    @target.get(path, response_model=List[response_schema], name=f"list_{tag}")
    async def list_records(
        search: Optional[str] = Query(None, description="Case-insensitive text filter"),
        db: AsyncSession = Depends(get_db)
    ):
        return await crud_class(db).get_multi(search)

    @target.get(f"{path}/{{record_id}}", response_model=response_schema, name=f"get_{tag}")
    async def get_record(
        record_id: int = Path(..., ge=1, le=MAX_DB_INT),
        db: AsyncSession = Depends(get_db)
    ):
        record = await crud_class(db).get(record_id)
        if not record:
            raise NotFoundException(f"{label} not found")
        return record

    @target.post(
        path,
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{tag}"
    )
    async def create_record(data: create_schema, db: AsyncSession = Depends(get_db)):
        return await crud_class(db).create(data.model_dump())

    @target.patch(f"{path}/{{record_id}}", response_model=response_schema, name=f"update_{tag}")
    async def update_record(
        data: update_schema,
        record_id: int = Path(..., ge=1, le=MAX_DB_INT),
        db: AsyncSession = Depends(get_db)
    ):
        record = await crud_class(db).update(record_id, data.model_dump(exclude_unset=True))
        if not record:
            raise NotFoundException(f"{label} not found")
        return record

    @target.delete(f"{path}/{{record_id}}", response_model=MessageResponse, name=f"delete_{tag}")
    async def delete_record(
        record_id: int = Path(..., ge=1, le=MAX_DB_INT),
        db: AsyncSession = Depends(get_db)
    ):
        if not await crud_class(db).delete(record_id):
            raise NotFoundException(f"{label} not found")
        return MessageResponse(message=f"{label} deleted")

register_crud_routes(protected, "/sales", SalesCRUD, SaleCreate, SaleUpdate, SaleResponse, "Sale")
register_crud_routes(
    protected, "/reservations", ReservationCRUD,
    ReservationCreate, ReservationUpdate, ReservationResponse, "Reservation"
)
register_crud_routes(
    protected, "/inventory", InventoryCRUD,
    InventoryCreate, InventoryUpdate, InventoryResponse, "Inventory item"
)

# Rewards

@protected.get("/rewards", response_model=List[RewardResponse])
async def list_all_rewards(db: AsyncSession = Depends(get_db)):
    """Every reward, including inactive and capped ones"""
    return await RewardService(db).list_all()

@protected.patch("/rewards/{reward_id}", response_model=RewardResponse)
async def update_reward(
    data: RewardUpdate,
    reward_id: int = Path(..., ge=1, le=MAX_DB_INT),
    db: AsyncSession = Depends(get_db)
):
    """Enable or disable a reward"""
    reward = await RewardService(db).set_active(reward_id, data.is_active)
    if not reward:
        raise NotFoundException("Reward not found")
    return reward

router.include_router(protected)
