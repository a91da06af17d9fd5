from sqlalchemy.ext.asyncio import AsyncSession

from ai.summarize import SummarizationClient
from constants import MAX_WORD_LIMIT
from db.repositories import SummaryRepository
from exceptions import EmptyInputError
from schemas import (
    Identity,
    SummarizeResponse,
    SummaryCreateRequest,
    SummaryResponse,
    WordCountResponse,
)
from utils import check_word_limit, count_words


class SummaryUsecase:
    def __init__(self):
        self._summary_repository = SummaryRepository()

    @staticmethod
    def count_words(text: str) -> WordCountResponse:
        """Count the words of a draft input.

        Args:
            text: The draft text.

        Returns:
            The word count and whether it fits the limit.

        """
        count = count_words(text=text)
        return WordCountResponse(
            count=count, limit=MAX_WORD_LIMIT, accepted=count <= MAX_WORD_LIMIT
        )

    @staticmethod
    async def summarize(text: str, client: SummarizationClient) -> SummarizeResponse:
        """Summarize the text after enforcing the input policy.

        Args:
            text: The text to summarize.
            client: The summarization client.

        Returns:
            The summary.

        """
        if not text.strip():
            raise EmptyInputError

        check_word_limit(text=text)

        return SummarizeResponse(summary=await client.summarize(text=text))

    async def save_summary(
        self, session: AsyncSession, identity: Identity, data: SummaryCreateRequest
    ) -> SummaryResponse:
        """Save a summary for the authenticated user.

        Args:
            session: The async session.
            identity: The authenticated identity.
            data: The input text and summary.

        Returns:
            The saved summary.

        """
        if not data.input_text.strip():
            raise EmptyInputError
        if not data.summary.strip():
            raise EmptyInputError(message="Summary is required")

        check_word_limit(text=data.input_text)

        return SummaryResponse.model_validate(
            await self._summary_repository.create(
                session=session,
                data={
                    "user_id": identity.user_id,
                    "input_text": data.input_text,
                    "summary": data.summary,
                },
            )
        )

    async def get_summaries(
        self, session: AsyncSession, identity: Identity
    ) -> list[SummaryResponse]:
        """Get the summaries of the authenticated user.

        Args:
            session: The async session.
            identity: The authenticated identity.

        Returns:
            The summaries, oldest first.

        """
        return [
            SummaryResponse.model_validate(summary)
            for summary in await self._summary_repository.get_all_for_user(
                session=session, user_id=identity.user_id
            )
        ]
