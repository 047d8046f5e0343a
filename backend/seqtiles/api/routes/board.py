"""Board generation and move API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.board import Move
from ...models.schemas import (
    GenerateBoardRequest,
    BoardResponse,
    MoveRequest,
    MoveResponse,
    ScoreResponse,
)
from ...core.generator import BoardGenerator
from ...core.board_ops import apply_move, is_round_complete
from ...core.scorer import compute_scores
from ...utils.helpers import board_to_dicts
from ..deps import get_board_generator, load_board

router = APIRouter(prefix="/api/board", tags=["board"])


@router.post("/generate", response_model=BoardResponse)
async def generate_board(
    request: GenerateBoardRequest,
    generator: BoardGenerator = Depends(get_board_generator),
) -> BoardResponse:
    """
    Generate a starting board.

    The same mode and seed always produce the same board.
    """
    try:
        layout = generator.generate(request.mode, request.seed)
        return BoardResponse(**layout.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Generation failed: {str(e)}")


@router.post("/move", response_model=MoveResponse)
async def apply_board_move(request: MoveRequest) -> MoveResponse:
    """
    Apply a keep or swap move and score it.

    Args:
        request: MoveRequest with the current board and the move.

    Returns:
        MoveResponse with the new board, its scoring and round status.
    """
    try:
        board = load_board(request)
        move = Move(
            kind=request.move.kind,
            first_index=request.move.first_index,
            second_index=request.move.second_index,
        )
        next_board, affected = apply_move(board, move)
        result = compute_scores(next_board, affected, request.rows, request.cols)

        return MoveResponse(
            tiles=board_to_dicts(next_board),
            scoring=ScoreResponse(**result.to_dict()),
            round_complete=is_round_complete(next_board),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Move failed: {str(e)}")
