#!/usr/bin/env python3
"""
Seed script to create demo floor plan, schedule, menu and reservations
"""

import asyncio
from datetime import date, time, timedelta
from decimal import Decimal


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from tavola.api.auth import get_password_hash
    from tavola.database import SessionLocal, engine, Base
    from tavola.models import (
        DiningArea,
        MenuCategory,
        MenuItem,
        MenuItemType,
        OperatingHours,
        Reservation,
        ReservationHistory,
        ReservationStatus,
        RestaurantSetting,
        RestaurantTable,
        TimeSlot,
        User,
        UserRole,
    )
    from tavola.services.reservations import generate_confirmation_code, INITIAL_HISTORY_REASON
    from tavola.utils.time import add_minutes

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        result = await db.execute(select(DiningArea).where(DiningArea.name == "Main Room"))
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        print("Creating demo users...")

        manager = User(
            email="manager@tavola.test",
            username="manager",
            hashed_password=get_password_hash("manager123"),
            first_name="Giulia",
            last_name="Rossi",
            role=UserRole.MANAGER,
            is_verified=True,
        )
        host = User(
            email="host@tavola.test",
            username="host",
            hashed_password=get_password_hash("host123"),
            first_name="Marco",
            role=UserRole.STAFF,
            is_verified=True,
        )
        db.add_all([manager, host])

        print("Creating floor plan...")

        main_room = DiningArea(name="Main Room", description="Ground floor dining room", capacity=40)
        terrace = DiningArea(name="Terrace", description="Outdoor seating, weather permitting", capacity=20)
        private = DiningArea(name="Private Room", description="Bookable for groups", capacity=12)
        db.add_all([main_room, terrace, private])
        await db.flush()

        layout = [
            (main_room, "M1", 2), (main_room, "M2", 2), (main_room, "M3", 4),
            (main_room, "M4", 4), (main_room, "M5", 6), (main_room, "M6", 8),
            (terrace, "T1", 2), (terrace, "T2", 4), (terrace, "T3", 4),
            (private, "P1", 12),
        ]
        tables = []
        for area, number, capacity in layout:
            table = RestaurantTable(
                dining_area_id=area.id,
                table_number=number,
                capacity=capacity,
                shape="round" if capacity <= 2 else "rectangle",
                metadata_json={"isOutdoor": area is terrace, "isAccessible": area is main_room},
            )
            tables.append(table)
        db.add_all(tables)

        print("Creating schedule...")

        # Tuesday to Sunday, closed Mondays (0=Sunday)
        for day in range(7):
            db.add(OperatingHours(
                day_of_week=day,
                open_time=time(17, 0),
                close_time=time(23, 0),
                is_closed=day == 1,
                meal_period="dinner",
            ))
            if day == 1:
                continue
            for hour in range(17, 22):
                for minute in (0, 30):
                    start = time(hour, minute)
                    end = time(hour + 1, minute)
                    db.add(TimeSlot(start_time=start, end_time=end, day_of_week=day, max_reservations=8))

        print("Creating menu...")

        categories = {
            "Antipasti": (1, MenuItemType.STARTER, [
                ("Burrata", "Apulian burrata, heirloom tomatoes, basil oil", "14.00", True),
                ("Carpaccio", "Beef carpaccio, rocket, parmigiano", "16.00", False),
            ]),
            "Primi": (2, MenuItemType.MAIN, [
                ("Cacio e Pepe", "Tonnarelli, pecorino romano, black pepper", "19.00", True),
                ("Risotto ai Funghi", "Carnaroli rice, porcini, thyme", "22.00", False),
            ]),
            "Dolci": (3, MenuItemType.DESSERT, [
                ("Tiramisu", "Mascarpone, savoiardi, espresso", "9.00", True),
                ("Panna Cotta", "Vanilla panna cotta, berry coulis", "8.00", False),
            ]),
        }
        for name, (order, item_type, items) in categories.items():
            category = MenuCategory(name=name, display_order=order)
            db.add(category)
            await db.flush()
            for item_name, description, price, featured in items:
                db.add(MenuItem(
                    category_id=category.id,
                    name=item_name,
                    description=description,
                    price=Decimal(price),
                    type=item_type,
                    is_vegetarian=item_name in ("Burrata", "Cacio e Pepe", "Risotto ai Funghi"),
                    is_featured=featured,
                ))

        print("Creating settings...")

        for category, name, value in [
            ("contact", "phone", "+1 555 010 2030"),
            ("contact", "email", "ciao@tavola.test"),
            ("contact", "address", "12 Via Roma, Springfield"),
            ("policies", "cancellation", "Please cancel at least 24 hours in advance."),
            ("policies", "max_party_size", "12"),
            ("about", "story", "A neighbourhood trattoria since 1998."),
        ]:
            db.add(RestaurantSetting(category=category, name=name, value=value))

        await db.flush()

        print("Creating sample reservations...")

        tomorrow = date.today() + timedelta(days=1)
        samples = [
            ("Alice Bianchi", "alice@example.com", "+15550000001", time(19, 0), 2, tables[0], ReservationStatus.PENDING),
            ("Bruno Verdi", "bruno@example.com", "+15550000002", time(19, 30), 4, tables[2], ReservationStatus.CONFIRMED),
            ("Chiara Neri", "chiara@example.com", "+15550000003", time(20, 0), 6, tables[4], ReservationStatus.CONFIRMED),
        ]
        for name, email, phone, at, guests, table, status in samples:
            reservation = Reservation(
                name=name,
                email=email,
                phone=phone,
                date=tomorrow,
                time=at,
                end_time=add_minutes(at, 90),
                guests=guests,
                status=status,
                assigned_table_id=table.id,
                confirmation_code=generate_confirmation_code(),
                source="phone",
            )
            db.add(reservation)
            await db.flush()
            db.add(ReservationHistory(
                reservation_id=reservation.id,
                previous_status=ReservationStatus.PENDING,
                new_status=ReservationStatus.PENDING,
                reason=INITIAL_HISTORY_REASON,
            ))
            if status != ReservationStatus.PENDING:
                db.add(ReservationHistory(
                    reservation_id=reservation.id,
                    previous_status=ReservationStatus.PENDING,
                    new_status=status,
                    changed_by_user_id=host.id,
                    reason="Confirmed by phone",
                ))

        await db.commit()

        print(f"""
Demo data created successfully!

Users:
  Manager:
    Username: manager
    Password: manager123

  Host (staff):
    Username: host
    Password: host123

Floor: {len(tables)} tables in 3 dining areas
Reservations: {len(samples)} for {tomorrow.isoformat()}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
