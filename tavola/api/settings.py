"""Restaurant settings API endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from tavola.api.auth import require_role
from tavola.database import get_db
from tavola.models.user import User, UserRole
from tavola.repositories import OperatingHoursRepository, SettingRepository
from tavola.schemas.schedule import OperatingHoursEnvelope
from tavola.schemas.settings import SettingEnvelope, SettingListEnvelope, SettingUpdate

router = APIRouter()
logger = structlog.get_logger()


@router.get("/hours", response_model=OperatingHoursEnvelope)
async def get_operating_hours(db: AsyncSession = Depends(get_db)):
    """Opening hours by weekday (0=Sunday)"""
    hours = await OperatingHoursRepository(db).list_all()
    return OperatingHoursEnvelope(count=len(hours), hours=hours)


@router.get("/{category}", response_model=SettingListEnvelope)
async def get_settings_category(category: str, db: AsyncSession = Depends(get_db)):
    """All settings of a category (an unknown category is just empty)"""
    settings = await SettingRepository(db).list_by_category(category)
    return SettingListEnvelope(category=category, count=len(settings), settings=settings)


@router.put("/{category}/{name}", response_model=SettingEnvelope)
async def put_setting(
    category: str,
    name: str,
    setting_data: SettingUpdate,
    current_user: User = Depends(require_role(UserRole.MANAGER)),
    db: AsyncSession = Depends(get_db),
):
    """Create or replace one setting"""
    repo = SettingRepository(db)
    setting = await repo.get_by_name(category, name)

    if setting is None:
        setting = await repo.create(category=category, name=name, **setting_data.model_dump())
    else:
        fields = setting_data.model_dump(exclude_unset=True)
        setting = await repo.update(setting.id, **fields)

    await db.commit()
    logger.info("Setting updated", category=category, name=name, user_id=current_user.id)
    return SettingEnvelope(setting=setting)
