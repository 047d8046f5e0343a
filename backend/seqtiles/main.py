"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .api.routes import board, score, bot, simulate

# Get settings
settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Board generation, scoring and computer opponents for the Sequence tile game",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(board.router)
app.include_router(score.router)
app.include_router(bot.router)
app.include_router(simulate.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Sequence Tiles Engine API",
        "endpoints": {
            "generate_board": "/api/board/generate",
            "apply_move": "/api/board/move",
            "score": "/api/score",
            "bot_move": "/api/bot/move",
            "bot_profiles": "/api/bot/profiles",
            "simulate": "/api/simulate",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "seqtiles.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
