"""Menu, settings, waitlist and user repositories"""

from typing import List, Optional

from tavola.models.menu import MenuCategory, MenuItem
from tavola.models.settings import RestaurantSetting
from tavola.models.user import User
from tavola.models.waitlist import WaitlistEntry, WaitlistStatus
from tavola.repositories.base import Repository

FEATURED_LIMIT = 6


class MenuCategoryRepository(Repository[MenuCategory]):
    model = MenuCategory

    async def list_active(self) -> List[MenuCategory]:
        return await self.list(MenuCategory.is_active == True, order_by=[MenuCategory.display_order.asc()])  # noqa: E712


class MenuItemRepository(Repository[MenuItem]):
    model = MenuItem

    async def list_by_category(self, category_id: int) -> List[MenuItem]:
        return await self.list(
            MenuItem.category_id == category_id,
            MenuItem.is_available == True,  # noqa: E712
            order_by=[MenuItem.name.asc()],
        )

    async def list_featured(self) -> List[MenuItem]:
        return await self.list(
            MenuItem.is_available == True,  # noqa: E712
            MenuItem.is_featured == True,  # noqa: E712
            order_by=[MenuItem.name.asc()],
            limit=FEATURED_LIMIT,
        )


class SettingRepository(Repository[RestaurantSetting]):
    model = RestaurantSetting

    async def list_by_category(self, category: str) -> List[RestaurantSetting]:
        return await self.list(RestaurantSetting.category == category, order_by=[RestaurantSetting.name.asc()])

    async def get_by_name(self, category: str, name: str) -> Optional[RestaurantSetting]:
        return await self.first(RestaurantSetting.category == category, RestaurantSetting.name == name)


class WaitlistRepository(Repository[WaitlistEntry]):
    model = WaitlistEntry

    async def list_waiting(self) -> List[WaitlistEntry]:
        return await self.list(
            WaitlistEntry.status == WaitlistStatus.WAITING,
            order_by=[WaitlistEntry.check_in_time.asc(), WaitlistEntry.id.asc()],
        )

    async def list_pending_notification(self) -> List[WaitlistEntry]:
        return await self.list(
            WaitlistEntry.status == WaitlistStatus.NOTIFIED,
            WaitlistEntry.notification_sent == False,  # noqa: E712
            order_by=[WaitlistEntry.check_in_time.asc()],
        )


class UserRepository(Repository[User]):
    model = User

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self.first(User.username == username)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self.first(User.email == email.lower())
