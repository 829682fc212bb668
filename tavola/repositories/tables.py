"""Dining area and table repositories"""

from typing import Collection, List

from tavola.models.table import DiningArea, RestaurantTable, TableStatus
from tavola.repositories.base import Repository


class DiningAreaRepository(Repository[DiningArea]):
    model = DiningArea

    async def list_active(self) -> List[DiningArea]:
        return await self.list(DiningArea.is_active == True, order_by=[DiningArea.name.asc()])  # noqa: E712


class TableRepository(Repository[RestaurantTable]):
    model = RestaurantTable

    async def list_active(self) -> List[RestaurantTable]:
        return await self.list(
            RestaurantTable.is_active == True,  # noqa: E712
            order_by=[RestaurantTable.table_number.asc()],
        )

    async def list_by_dining_area(self, dining_area_id: int) -> List[RestaurantTable]:
        return await self.list(
            RestaurantTable.dining_area_id == dining_area_id,
            RestaurantTable.is_active == True,  # noqa: E712
            order_by=[RestaurantTable.table_number.asc()],
        )

    async def list_fitting(
        self,
        min_capacity: int,
        max_capacity: int,
        exclude_ids: Collection[int] = (),
    ) -> List[RestaurantTable]:
        """Active, bookable tables with capacity in [min_capacity, max_capacity], smallest first"""
        criteria = [
            RestaurantTable.is_active == True,  # noqa: E712
            RestaurantTable.status != TableStatus.MAINTENANCE,
            RestaurantTable.capacity >= min_capacity,
            RestaurantTable.capacity <= max_capacity,
        ]
        if exclude_ids:
            criteria.append(RestaurantTable.id.notin_(list(exclude_ids)))
        return await self.list(
            *criteria,
            order_by=[RestaurantTable.capacity.asc(), RestaurantTable.table_number.asc()],
        )
