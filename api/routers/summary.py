from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import auth, db, summarizer, summary
from schemas import (
    Identity,
    SummarizeResponse,
    SummaryCreateRequest,
    SummaryResponse,
    TextRequest,
    WordCountResponse,
)

router = APIRouter(prefix="/api", tags=["Summary"])


@router.post(
    path="/word-count", dependencies=[Depends(dependency=auth.get_identity)]
)
async def word_count(
    data: Annotated[TextRequest, Body(default=...)],
    usecase: Annotated[
        summary.SummaryUsecase, Depends(dependency=summary.get_summary_usecase)
    ],
) -> WordCountResponse:
    return usecase.count_words(text=data.text)


@router.post(
    path="/summarize", dependencies=[Depends(dependency=auth.get_identity)]
)
async def summarize(
    data: Annotated[TextRequest, Body(default=...)],
    client: Annotated[
        summarizer.SummarizationClient,
        Depends(dependency=summarizer.get_summarization_client),
    ],
    usecase: Annotated[
        summary.SummaryUsecase, Depends(dependency=summary.get_summary_usecase)
    ],
) -> SummarizeResponse:
    return await usecase.summarize(text=data.text, client=client)


@router.post(path="/save-summary")
async def save_summary(
    data: Annotated[SummaryCreateRequest, Body(default=...)],
    identity: Annotated[Identity, Depends(dependency=auth.get_identity)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        summary.SummaryUsecase, Depends(dependency=summary.get_summary_usecase)
    ],
) -> SummaryResponse:
    return await usecase.save_summary(session=session, identity=identity, data=data)


@router.get(path="/summaries")
async def get_summaries(
    identity: Annotated[Identity, Depends(dependency=auth.get_identity)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[
        summary.SummaryUsecase, Depends(dependency=summary.get_summary_usecase)
    ],
) -> list[SummaryResponse]:
    return await usecase.get_summaries(session=session, identity=identity)
