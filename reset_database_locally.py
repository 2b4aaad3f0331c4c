import asyncio
import logging
from datetime import timedelta

from app.database import engine, Base, async_session
from app.models import Player, MatchHistory, utcnow

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("reset_database")

DEMO_PLAYERS = [
    # username, wins, losses, rating
    ("Alpha", 7, 3, 1240),
    ("Bravo", 4, 6, 980),
    ("Charlie", 9, 1, 1410),
    ("Delta", 0, 0, 1000),
]


async def drop_and_recreate_all_tables():
    async with engine.begin() as conn:
        logger.warning("Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Recreating all tables...")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables recreated.")

    # 👇 Insert demo players after tables are created
    async with async_session() as session:
        now = utcnow()
        for username, wins, losses, rating in DEMO_PLAYERS:
            player = Player(
                username=username,
                email=f"{username.lower()}@example.com",
                total_matches=wins + losses,
                wins=wins,
                losses=losses,
                rating=rating,
                created_at=now,
            )
            session.add(player)
            await session.flush()  # Ensure player.id is available

            for i in range(min(wins + losses, 3)):
                session.add(MatchHistory(
                    player_id=player.id,
                    game="Arena",
                    match_date=now - timedelta(days=i),
                    is_win=i < wins,
                    score=100 + 10 * i,
                ))
        await session.commit()
        logger.info("Inserted %s demo players.", len(DEMO_PLAYERS))


if __name__ == "__main__":
    asyncio.run(drop_and_recreate_all_tables())
