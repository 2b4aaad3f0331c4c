"""Player storage operations.

Every function takes the request-scoped ``AsyncSession`` and turns any
SQLAlchemy failure into ``StorageError`` after rolling the session back.
"""
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import List, Optional
import logging

from app.errors import NotFoundError, StorageError
from app.models import MatchHistory, Player, utcnow
from app.schemas import PlayerPayload

logger = logging.getLogger(__name__)


async def _fail(db: AsyncSession, operation: str, exc: SQLAlchemyError):
    try:
        await db.rollback()
    except SQLAlchemyError:
        logger.warning("Rollback after failed %s also failed", operation)
    raise StorageError(operation) from exc


def _apply_payload(player: Player, payload: PlayerPayload) -> None:
    player.username = payload.username
    player.email = payload.email
    player.total_matches = payload.total_matches
    player.wins = payload.wins
    player.losses = payload.losses
    player.rating = payload.elo_rating


async def list_players(db: AsyncSession) -> List[Player]:
    try:
        result = await db.execute(select(Player))
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await _fail(db, "list_players", e)


async def get_player(db: AsyncSession, player_id: int) -> Optional[Player]:
    try:
        return await db.get(Player, player_id)
    except SQLAlchemyError as e:
        await _fail(db, "get_player", e)


async def create_player(db: AsyncSession, payload: PlayerPayload) -> Player:
    player = Player(created_at=utcnow())
    _apply_payload(player, payload)
    db.add(player)
    try:
        await db.commit()
        await db.refresh(player)
    except SQLAlchemyError as e:
        await _fail(db, "create_player", e)
    logger.info("Created player %s (ID: %s)", player.username, player.id)
    return player


async def update_player(db: AsyncSession, player_id: int, payload: PlayerPayload) -> Player:
    player = await get_player(db, player_id)
    if player is None:
        raise NotFoundError("Player", player_id)

    _apply_payload(player, payload)
    player.last_active_at = utcnow()
    try:
        await db.commit()
        await db.refresh(player)
    except SQLAlchemyError as e:
        await _fail(db, "update_player", e)
    logger.info("Updated player %s (ID: %s)", player.username, player.id)
    return player


async def delete_player(db: AsyncSession, player_id: int) -> None:
    player = await get_player(db, player_id)
    if player is None:
        raise NotFoundError("Player", player_id)

    try:
        # ✅ Delete match history first so the cascade holds even where the FK doesn't
        await db.execute(delete(MatchHistory).where(MatchHistory.player_id == player_id))
        await db.delete(player)
        await db.commit()
    except SQLAlchemyError as e:
        await _fail(db, "delete_player", e)
    logger.info("Deleted player %s and their match history", player_id)


async def leaderboard(db: AsyncSession, limit: int) -> List[Player]:
    """Top ``limit`` players by rating, ties broken by lowest id."""
    stmt = select(Player).order_by(Player.rating.desc(), Player.id.asc()).limit(limit)
    try:
        result = await db.execute(stmt)
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await _fail(db, "leaderboard", e)


async def match_histories_for_player(db: AsyncSession, player_id: int) -> List[MatchHistory]:
    stmt = (
        select(MatchHistory)
        .where(MatchHistory.player_id == player_id)
        .order_by(MatchHistory.match_date.desc(), MatchHistory.id.desc())
    )
    try:
        result = await db.execute(stmt)
        return list(result.scalars().all())
    except SQLAlchemyError as e:
        await _fail(db, "match_histories_for_player", e)
