"""FastAPI application exposing exercise selection."""

import asyncio
import logging
import random
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request

from workout_builder.config import get_settings
from workout_builder.context import AppContext, create_context
from workout_builder.db.repositories import AttributeRepository, ExerciseRepository
from workout_builder.db.session import init_db
from workout_builder.server.schemas import (
    AttributeResponse,
    GetExercisesRequest,
    HealthResponse,
    MuscleGroupResponse,
)
from workout_builder.services import ExerciseSelectionService

logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    ctx = create_context()
    app.state.ctx = ctx

    settings = ctx.settings
    logger.info(f"Workout Builder server starting on {settings.host}:{settings.port}")
    logger.info(f"Database: {settings.database_url}")

    init_db(ctx.engine)
    logger.info("Database initialized")

    yield

    ctx.engine.dispose()
    logger.info("Workout Builder server shutting down")


app = FastAPI(
    title="Workout Builder",
    description="Randomized, primary-weighted exercise selection",
    version="0.1.0",
    lifespan=lifespan,
)


def get_context(request: Request) -> AppContext:
    """Dependency returning the application context."""
    return request.app.state.ctx


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "workout-builder"}


def select_exercises(
    request: GetExercisesRequest, ctx: AppContext, rng: random.Random
) -> list[dict]:
    """Run a selection in its own session and serialize it."""
    with ctx.session() as session:
        service = ExerciseSelectionService(session, ctx.settings, rng)
        result = service.get_exercises(request.muscles, request.equipment, request.limit).map(
            lambda groups: [group.to_dict() for group in groups]
        )
        if result.is_err:
            raise HTTPException(status_code=500, detail=result.error)
        return result.unwrap()


@app.post("/exercises", response_model=list[MuscleGroupResponse])
async def get_exercises(body: GetExercisesRequest, ctx: AppContext = Depends(get_context)):
    """Select exercises for the requested muscles and equipment."""
    logger.info(
        f"Exercise request: muscles={[m.value for m in body.muscles]} "
        f"equipment={[e.value for e in body.equipment]} limit={body.limit}"
    )
    # Worker threads get their own generator, seeded here on the event loop
    rng = random.Random(ctx.rng.random())
    return await asyncio.to_thread(select_exercises, body, ctx, rng)


def load_exercise(exercise_id: int, ctx: AppContext) -> dict | None:
    with ctx.session() as session:
        exercise = ExerciseRepository(session).get_by_id(exercise_id)
        return exercise.to_dict() if exercise else None


@app.get("/exercises/{exercise_id}")
async def get_exercise(exercise_id: int, ctx: AppContext = Depends(get_context)):
    """Get a single exercise with its attributes."""
    exercise = await asyncio.to_thread(load_exercise, exercise_id, ctx)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


def load_attributes(ctx: AppContext) -> list[dict]:
    with ctx.session() as session:
        return [name.to_dict() for name in AttributeRepository(session).list_all()]


@app.get("/attributes", response_model=list[AttributeResponse])
async def list_attributes(ctx: AppContext = Depends(get_context)):
    """List attribute names with their stored values."""
    return await asyncio.to_thread(load_attributes, ctx)
