"""Table and dining area API endpoints"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from tavola.api.auth import require_role
from tavola.api.deps import get_availability_resolver
from tavola.database import get_db
from tavola.errors import InvalidArgument, NotFound
from tavola.models.user import User, UserRole
from tavola.repositories import DiningAreaRepository, TableRepository
from tavola.schemas.table import (
    DiningAreaCreate,
    DiningAreaEnvelope,
    DiningAreaListEnvelope,
    TableCreate,
    TableEnvelope,
    TableListEnvelope,
    TableStatusUpdate,
)
from tavola.services.availability import AvailabilityResolver

router = APIRouter()
areas_router = APIRouter()
logger = structlog.get_logger()


@router.get("/available", response_model=TableListEnvelope)
async def available_tables(
    date: str = Query(...),
    time: str = Query(...),
    party_size: int = Query(..., alias="partySize"),
    resolver: AvailabilityResolver = Depends(get_availability_resolver),
):
    """Free tables for a party at an exact date and time, smallest first"""
    tables = await resolver.available_tables(date, time, party_size)
    return TableListEnvelope(count=len(tables), tables=tables)


@router.get("", response_model=TableListEnvelope)
async def list_tables(db: AsyncSession = Depends(get_db)):
    """All active tables"""
    tables = await TableRepository(db).list_active()
    return TableListEnvelope(count=len(tables), tables=tables)


@router.post("", response_model=TableEnvelope, status_code=201)
async def create_table(
    table_data: TableCreate,
    current_user: User = Depends(require_role(UserRole.STAFF)),
    db: AsyncSession = Depends(get_db),
):
    """Add a table to a dining area"""
    if await DiningAreaRepository(db).get(table_data.dining_area_id) is None:
        raise InvalidArgument(
            "Dining area does not exist",
            errors=[{"field": "diningAreaId", "message": "Unknown dining area"}],
        )

    fields = table_data.model_dump(exclude={"metadata"})
    table = await TableRepository(db).create(**fields, metadata_json=table_data.metadata)
    await db.commit()

    logger.info("Table created", table_id=table.id, table_number=table.table_number)
    return TableEnvelope(table=table)


@router.get("/{table_id}", response_model=TableEnvelope)
async def get_table(table_id: int, db: AsyncSession = Depends(get_db)):
    table = await TableRepository(db).get(table_id)
    if table is None:
        raise NotFound(f"Table {table_id} not found")
    return TableEnvelope(table=table)


@router.patch("/{table_id}/status", response_model=TableEnvelope)
async def update_table_status(
    table_id: int,
    status_data: TableStatusUpdate,
    current_user: User = Depends(require_role(UserRole.STAFF)),
    db: AsyncSession = Depends(get_db),
):
    """Set the physical status of a table (seating, maintenance)"""
    table = await TableRepository(db).update(table_id, status=status_data.status)
    if table is None:
        raise NotFound(f"Table {table_id} not found")
    await db.commit()

    logger.info("Table status updated", table_id=table.id, status=table.status.value)
    return TableEnvelope(table=table)


@areas_router.get("", response_model=DiningAreaListEnvelope)
async def list_dining_areas(db: AsyncSession = Depends(get_db)):
    """Active dining areas by name"""
    areas = await DiningAreaRepository(db).list_active()
    return DiningAreaListEnvelope(count=len(areas), dining_areas=areas)


@areas_router.post("", response_model=DiningAreaEnvelope, status_code=201)
async def create_dining_area(
    area_data: DiningAreaCreate,
    current_user: User = Depends(require_role(UserRole.STAFF)),
    db: AsyncSession = Depends(get_db),
):
    area = await DiningAreaRepository(db).create(**area_data.model_dump())
    await db.commit()
    return DiningAreaEnvelope(dining_area=area)


@areas_router.get("/{area_id}", response_model=DiningAreaEnvelope)
async def get_dining_area(area_id: int, db: AsyncSession = Depends(get_db)):
    area = await DiningAreaRepository(db).get(area_id)
    if area is None:
        raise NotFound(f"Dining area {area_id} not found")
    return DiningAreaEnvelope(dining_area=area)


@areas_router.get("/{area_id}/tables", response_model=TableListEnvelope)
async def list_dining_area_tables(area_id: int, db: AsyncSession = Depends(get_db)):
    """Active tables of one dining area by table number"""
    if await DiningAreaRepository(db).get(area_id) is None:
        raise NotFound(f"Dining area {area_id} not found")
    tables = await TableRepository(db).list_by_dining_area(area_id)
    return TableListEnvelope(count=len(tables), tables=tables)
