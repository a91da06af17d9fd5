from ai.summarize import SummarizationClient


def get_summarization_client() -> SummarizationClient:
    """Get the summarization client.

    Returns:
        The summarization client.

    """
    return SummarizationClient.from_settings()
