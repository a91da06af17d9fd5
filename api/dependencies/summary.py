from usecases import SummaryUsecase


def get_summary_usecase() -> SummaryUsecase:
    """Get the summary usecase.

    Returns:
        The summary usecase.

    """
    return SummaryUsecase()
