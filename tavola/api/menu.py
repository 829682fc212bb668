"""Menu API endpoints (read-only catalog)"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tavola.database import get_db
from tavola.errors import NotFound
from tavola.repositories import MenuCategoryRepository, MenuItemRepository
from tavola.schemas.menu import MenuCategoryListEnvelope, MenuItemEnvelope, MenuItemListEnvelope

router = APIRouter()


@router.get("/categories", response_model=MenuCategoryListEnvelope)
async def list_categories(db: AsyncSession = Depends(get_db)):
    """Active categories in display order"""
    categories = await MenuCategoryRepository(db).list_active()
    return MenuCategoryListEnvelope(count=len(categories), categories=categories)


@router.get("/categories/{category_id}/items", response_model=MenuItemListEnvelope)
async def list_category_items(category_id: int, db: AsyncSession = Depends(get_db)):
    """Available items of a category by name"""
    if await MenuCategoryRepository(db).get(category_id) is None:
        raise NotFound(f"Menu category {category_id} not found")
    items = await MenuItemRepository(db).list_by_category(category_id)
    return MenuItemListEnvelope(count=len(items), items=items)


@router.get("/featured", response_model=MenuItemListEnvelope)
async def list_featured_items(db: AsyncSession = Depends(get_db)):
    items = await MenuItemRepository(db).list_featured()
    return MenuItemListEnvelope(count=len(items), items=items)


@router.get("/items/{item_id}", response_model=MenuItemEnvelope)
async def get_menu_item(item_id: int, db: AsyncSession = Depends(get_db)):
    item = await MenuItemRepository(db).get(item_id)
    if item is None:
        raise NotFound(f"Menu item {item_id} not found")
    return MenuItemEnvelope(item=item)
