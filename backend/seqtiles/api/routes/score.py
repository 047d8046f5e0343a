"""Scoring API routes."""
from fastapi import APIRouter, HTTPException

from ...models.schemas import ScoreRequest, ScoreResponse
from ...core.scorer import compute_scores
from ..deps import load_board

router = APIRouter(prefix="/api", tags=["score"])


@router.post("/score", response_model=ScoreResponse)
async def score_reveal(request: ScoreRequest) -> ScoreResponse:
    """
    Score the tiles revealed by one event.

    Only matches through ``new_indices`` are counted.
    """
    try:
        board = load_board(request)
        for idx in request.new_indices:
            if not 0 <= idx < len(board):
                raise ValueError(f"Index {idx} is outside the board")

        result = compute_scores(board, request.new_indices, request.rows, request.cols)
        return ScoreResponse(**result.to_dict())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Scoring failed: {str(e)}")
