from typing import Any

import httpx
import logfire

from exceptions import (
    ProviderConfigError,
    ProviderMalformedResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from settings import huggingface_settings

SUMMARY_FIELD = "summary_text"


class SummarizationClient:
    """Client for the hosted summarization model.

    Every call is a fresh request to the provider. Nothing is cached and
    failures are never retried here; callers decide whether to try again.
    """

    def __init__(
        self,
        api_key: str,
        url: str,
        timeout: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, transport: httpx.AsyncBaseTransport | None = None
    ) -> "SummarizationClient":
        return cls(
            api_key=huggingface_settings.api_key,
            url=huggingface_settings.model_url,
            timeout=huggingface_settings.timeout,
            transport=transport,
        )

    @staticmethod
    def _parse_summary(data: Any) -> str:
        """Parse the summary out of the provider payload.

        Args:
            data: The decoded JSON payload.

        Returns:
            The summary text.

        Raises:
            ProviderMalformedResponseError: If the payload has no summary.

        """
        if not isinstance(data, list) or not data:
            raise ProviderMalformedResponseError

        first = data[0]
        summary = first.get(SUMMARY_FIELD) if isinstance(first, dict) else None
        if not isinstance(summary, str) or not summary.strip():
            raise ProviderMalformedResponseError

        return summary

    async def summarize(self, text: str) -> str:
        """Summarize the text.

        Args:
            text: The text to summarize.

        Returns:
            The summary text.

        Raises:
            ProviderConfigError: If no provider API key is configured.
            ProviderTimeoutError: If the provider did not answer in time.
            ProviderUnavailableError: If the provider is unreachable or failed.
            ProviderMalformedResponseError: If the provider answered nonsense.

        """
        if not self._api_key:
            raise ProviderConfigError

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url=self._url,
                    json={"inputs": text},
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
                response.raise_for_status()
        except httpx.TimeoutException as error:
            logfire.warn("Summarization provider timed out", url=self._url)
            raise ProviderTimeoutError from error
        except httpx.HTTPStatusError as error:
            logfire.warn(
                "Summarization provider returned an error",
                status_code=error.response.status_code,
            )
            raise ProviderUnavailableError(
                message=(
                    "Summarization provider returned status "
                    f"{error.response.status_code}"
                )
            ) from error
        except httpx.HTTPError as error:
            logfire.warn("Summarization provider is unreachable", error=str(error))
            raise ProviderUnavailableError from error

        try:
            data = response.json()
        except ValueError as error:
            raise ProviderMalformedResponseError from error

        return self._parse_summary(data=data)

    async def ping(self) -> bool:
        """Check that the provider endpoint answers at all.

        Returns:
            True if the provider responded without a server error.

        """
        try:
            async with httpx.AsyncClient(
                timeout=5.0, transport=self._transport
            ) as client:
                response = await client.get(
                    url=self._url,
                    headers={"Authorization": f"Bearer {self._api_key}"},
                )
        except httpx.HTTPError:
            return False

        return response.status_code < httpx.codes.INTERNAL_SERVER_ERROR
