"""Bot move API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...config import get_settings
from ...models.bot_profile import BotDifficulty, get_all_profiles
from ...models.schemas import (
    BotMoveRequest,
    BotMoveResponse,
    BotProfileListResponse,
    ErrorResponse,
)
from ...core.bot import BotEngine, NoLegalMoveError
from ..deps import get_bot, load_board

router = APIRouter(prefix="/api/bot", tags=["bot"])


@router.post(
    "/move",
    response_model=BotMoveResponse,
    responses={409: {"model": ErrorResponse}},
)
async def bot_move(
    request: BotMoveRequest,
    bot: BotEngine = Depends(get_bot),
) -> BotMoveResponse:
    """
    Choose a move for a computer player.

    Returns 409 when the board has no hidden tiles left.
    """
    difficulty = request.difficulty or BotDifficulty(get_settings().default_bot_difficulty)

    try:
        board = load_board(request)
        move = bot.choose_move(board, request.rows, request.cols, difficulty)
    except NoLegalMoveError as e:
        raise HTTPException(status_code=409, detail=f"Bot move failed: {str(e)}")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Bot move failed: {str(e)}")

    return BotMoveResponse(**move.to_dict(), difficulty=difficulty)


@router.get("/profiles", response_model=BotProfileListResponse)
async def list_bot_profiles() -> BotProfileListResponse:
    """List the difficulty profiles."""
    return BotProfileListResponse(profiles=[p.to_dict() for p in get_all_profiles()])
