"""Sample data seeder for the agent ranking tables."""

import asyncio
from datetime import date, timedelta
from decimal import Decimal
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import func, select, text

from app.core.config import settings
from app.models import SpaceTravelAgent, AssignmentHistory, Booking
from app.schemas.common import BookingStatus

COMMUNICATION_METHODS = ["Text", "Email", "Phone Call"]
LEAD_SOURCES = ["Organic", "Referral", "Paid Ad", "Social Media"]
DESTINATIONS = ["Mars", "Moon", "Europa", "Titan"]
LAUNCH_LOCATIONS = [
    "Dallas-Fort Worth Launch Complex",
    "Cape Canaveral Spaceport",
    "Vandenberg Launch Site",
]
CUSTOMERS = ["John Doe", "Jane Smith", "Ava Chen", "Omar Haddad", "Lena Novak"]
# Every fifth assignment never turned into a booking
STATUS_CYCLE = [
    BookingStatus.CONFIRMED.value,
    BookingStatus.CANCELLED.value,
    BookingStatus.CONFIRMED.value,
    BookingStatus.PENDING.value,
    None,
]

AGENTS = [
    ("Sally", "Ride", Decimal("4.80"), Decimal("12")),
    ("Neil", "Armstrong", Decimal("4.50"), Decimal("8")),
    ("Mae", "Jemison", Decimal("4.20"), Decimal("15")),
    ("Yuri", "Gagarin", Decimal("3.90"), Decimal("3")),
    ("Chris", "Hadfield", Decimal("4.60"), Decimal("6")),
    ("Valentina", "Tereshkova", None, Decimal("1")),
    ("Buzz", "Aldrin", Decimal("4.10"), None),
    ("Peggy", "Whitson", Decimal("4.90"), Decimal("18")),
]


async def seed():
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with session_maker() as session:
        print("Seeding agent ranking sample data")

        # TRUNCATE ... CASCADE handles FK ordering and resets identities
        await session.execute(
            text(
                "TRUNCATE TABLE bookings, assignment_history, space_travel_agents "
                "RESTART IDENTITY CASCADE"
            )
        )
        await session.commit()
        print("Cleared existing data")

        # 1. Agents (two with missing rating / tenure)
        agents = []
        for first, last, rating, years in AGENTS:
            agent = SpaceTravelAgent(
                first_name=first,
                last_name=last,
                email=f"{first.lower()}.{last.lower()}@astra.space",
                average_customer_service_rating=rating,
                years_of_service=years,
            )
            session.add(agent)
            agents.append(agent)
        await session.flush()
        print(f"Created {len(agents)} agents")

        # 2. Assignment history — the last agent is left without history
        assignments = []
        for i in range(140):
            agent = agents[i % (len(agents) - 1)]
            assignment = AssignmentHistory(
                agent_id=agent.agent_id,
                customer_name=CUSTOMERS[i % len(CUSTOMERS)],
                communication_method=COMMUNICATION_METHODS[i % 3],
                lead_source=LEAD_SOURCES[(i // 2) % len(LEAD_SOURCES)],
            )
            session.add(assignment)
            assignments.append(assignment)
        await session.flush()
        print(f"Created {len(assignments)} assignments")

        # 3. Bookings — at most one per assignment
        bookings = 0
        today = date.today()
        for i, assignment in enumerate(assignments):
            status = STATUS_CYCLE[(i + i // 7) % len(STATUS_CYCLE)]
            if status is None:
                continue
            session.add(
                Booking(
                    assignment_id=assignment.assignment_id,
                    customer_name=assignment.customer_name,
                    booking_status=status,
                    total_revenue=Decimal(50000 + (i % 9) * 25000),
                    destination=DESTINATIONS[(i // 3) % len(DESTINATIONS)],
                    launch_location=LAUNCH_LOCATIONS[i % len(LAUNCH_LOCATIONS)],
                    booking_date=today - timedelta(days=400 - i * 2),
                )
            )
            bookings += 1
        await session.commit()
        print(f"Created {bookings} bookings")

        # Validation
        counts = {}
        for model in (SpaceTravelAgent, AssignmentHistory, Booking):
            result = await session.execute(select(func.count()).select_from(model))
            counts[model.__tablename__] = result.scalar()

        print("\nValidation:")
        for table, count in counts.items():
            print(f"  {table}: {count}")
        print("Seeding complete")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
