from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app import repository
from app.config import LEADERBOARD_DEFAULT_LIMIT, LEADERBOARD_MAX_LIMIT
from app.database import get_db
from app.errors import NotFoundError
from app.schemas import INT32_MAX, INT32_MIN, PlayerPayload, PlayerResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def clamp_limit(limit: int) -> int:
    return max(1, min(limit, LEADERBOARD_MAX_LIMIT))


@router.get("", response_model=List[PlayerResponse])
async def get_players(db: AsyncSession = Depends(get_db)):
    return await repository.list_players(db)


# ✅ Declared before /{player_id} so "leaderboard" isn't parsed as an id
@router.get("/leaderboard", response_model=List[PlayerResponse])
async def get_leaderboard(
    limit: int = Query(LEADERBOARD_DEFAULT_LIMIT),
    db: AsyncSession = Depends(get_db),
):
    effective = clamp_limit(limit)
    if effective != limit:
        logger.info("Leaderboard limit %s clamped to %s", limit, effective)
    return await repository.leaderboard(db, effective)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(
    player_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    logger.info("Fetching player with ID: %s", player_id)
    player = await repository.get_player(db, player_id)
    if player is None:
        raise NotFoundError("Player", player_id)
    return player


@router.post("", response_model=PlayerResponse, status_code=status.HTTP_201_CREATED)
async def create_player(payload: PlayerPayload, response: Response, db: AsyncSession = Depends(get_db)):
    player = await repository.create_player(db, payload)
    response.headers["Location"] = f"/players/{player.id}"
    return player


@router.put("/{player_id}", response_model=PlayerResponse)
async def update_player(
    payload: PlayerPayload,
    player_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    return await repository.update_player(db, player_id, payload)


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_player(
    player_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX),
    db: AsyncSession = Depends(get_db),
):
    await repository.delete_player(db, player_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
