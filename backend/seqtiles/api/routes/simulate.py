"""Bot-vs-bot simulation API routes."""
from fastapi import APIRouter, Depends, HTTPException

from ...models.schemas import SimulateRequest, SimulateResponse, SeatResultItem
from ...core.simulator import RoundSimulator
from ..deps import get_round_simulator

router = APIRouter(prefix="/api", tags=["simulate"])


@router.post("/simulate", response_model=SimulateResponse)
async def simulate_rounds(
    request: SimulateRequest,
    simulator: RoundSimulator = Depends(get_round_simulator),
) -> SimulateResponse:
    """
    Play bot-only rounds and report per-seat statistics.

    Args:
        request: SimulateRequest with seat difficulties and iterations.
        simulator: RoundSimulator dependency.

    Returns:
        SimulateResponse with one entry per seat.
    """
    try:
        results = simulator.benchmark(
            difficulties=request.difficulties,
            iterations=request.iterations,
            mode=request.mode,
            seed=request.seed,
        )
        return SimulateResponse(seats=[SeatResultItem(**r.to_dict()) for r in results])
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Simulation failed: {str(e)}")
