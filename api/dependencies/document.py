from usecases import DocumentUsecase


def get_document_usecase() -> DocumentUsecase:
    """Get the document usecase.

    Returns:
        The document usecase.

    """
    return DocumentUsecase()
