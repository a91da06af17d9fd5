from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import db, health, summarizer
from schemas import HealthResponse, ServiceHealthResponse, StatusResponse

router = APIRouter(tags=["Health"])


@router.get(path="/api/status")
async def get_status(
    usecase: Annotated[health.HealthUsecase, Depends(health.get_health_usecase)],
) -> StatusResponse:
    return usecase.status()


@router.get(path="/health/liveness")
async def liveness() -> JSONResponse:
    return JSONResponse(content={"status": True})


@router.get(path="/health/readiness")
async def readiness(
    database: Annotated[db.Database, Depends(db.get_database)],
    client: Annotated[
        summarizer.SummarizationClient,
        Depends(summarizer.get_summarization_client),
    ],
    usecase: Annotated[health.HealthUsecase, Depends(health.get_health_usecase)],
) -> HealthResponse:
    health = await usecase.health(database=database, client=client)
    return HealthResponse(
        services=[
            ServiceHealthResponse(name=name, status=status)
            for name, status in health.items()
        ]
    )
