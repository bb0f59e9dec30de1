"""
Table Order Service — Menu seed data

[CONFIG DATA] — the ten menu items every deployment starts with. Existing
rows are left untouched so an external menu process can rename items.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from table_order.models.menu import MenuRecord

logger = logging.getLogger(__name__)

MENU_SEED: list[tuple[int, str]] = [
    (1, "ちゃづけ"),
    (2, "らーめん"),
    (3, "弁当"),
    (4, "牛丼"),
    (5, "焼き鳥"),
    (6, "枝豆"),
    (7, "刺身"),
    (8, "うどん"),
    (9, "Nasi Goreng"),
    (10, "Rendang"),
]


async def seed_menus(session_factory: async_sessionmaker[AsyncSession]) -> int:
    """Insert any missing seed menus. Returns how many rows were added."""
    async with session_factory() as session:
        result = await session.execute(select(MenuRecord.menu_id))
        existing = set(result.scalars().all())
        missing = [(mid, name) for mid, name in MENU_SEED if mid not in existing]
        for menu_id, name in missing:
            session.add(MenuRecord(menu_id=menu_id, name=name))
        await session.commit()

    if missing:
        logger.info("Seeded %d menu item(s)", len(missing))
    return len(missing)
