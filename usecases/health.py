import asyncio

from ai.summarize import SummarizationClient
from constants import STATUS_MESSAGE
from db.sessions import Database
from schemas import StatusResponse


class HealthUsecase:
    @staticmethod
    def status() -> StatusResponse:
        return StatusResponse(message=STATUS_MESSAGE)

    async def health(
        self, database: Database, client: SummarizationClient
    ) -> dict[str, bool]:
        """Check all services concurrently.

        Args:
            database: The database handle.
            client: The summarization client.

        Returns:
            Dictionary of service names and their health status.

        """
        tasks = [
            ("postgres", database.ping()),
            ("huggingface", client.ping()),
        ]

        results = await asyncio.gather(
            *[task[1] for task in tasks], return_exceptions=True
        )

        service_checks = {}
        for service_name, result in zip(
            [task[0] for task in tasks], results, strict=True
        ):
            if isinstance(result, Exception):
                service_checks[service_name] = False
            else:
                service_checks[service_name] = result

        return service_checks
