import asyncio
from pathlib import Path
from typing import BinaryIO

import logfire

from enums import DocumentType
from exceptions import (
    BaseError,
    DocumentMissingError,
    DocumentNotSupportedError,
    DocumentReadError,
    DocumentTooLargeError,
)
from extraction import extract_text
from schemas import ExtractionResponse
from settings import core_settings
from utils import transient_file


class DocumentUsecase:
    def __init__(self, upload_dir: Path | None = None):
        self._upload_dir = upload_dir or core_settings.upload_dir

    @staticmethod
    def _validate_document(
        file_size: int | None, content_type: str | None
    ) -> DocumentType:
        """Validate the document.

        Args:
            file_size: The file size.
            content_type: The declared MIME type.

        Returns:
            The document type.

        """
        document_type = DocumentType.from_content_type(content_type=content_type)
        if not document_type:
            raise DocumentNotSupportedError

        if not file_size or file_size > core_settings.max_file_size:
            raise DocumentTooLargeError

        return document_type

    def _extract(self, file: BinaryIO, document_type: DocumentType) -> str:
        with transient_file(
            content=file.read(),
            directory=self._upload_dir,
            suffix=document_type.suffix,
        ) as filepath:
            return extract_text(document_type=document_type, filepath=filepath)

    async def extract_document(
        self,
        file: BinaryIO | None,
        file_size: int | None,
        content_type: str | None,
    ) -> ExtractionResponse:
        """Extract plain text from an uploaded document.

        The upload is stored in a transient file for the duration of the
        extraction and removed afterwards, whatever the outcome.

        Args:
            file: The file.
            file_size: The file size.
            content_type: The declared MIME type.

        Returns:
            The extracted text.

        """
        if file is None:
            raise DocumentMissingError

        document_type = self._validate_document(
            file_size=file_size, content_type=content_type
        )

        try:
            text = await asyncio.to_thread(self._extract, file, document_type)
        except BaseError as error:
            logfire.warn(
                "Document extraction failed",
                document_type=document_type.name,
                reason=error.message,
            )
            raise
        except OSError as error:
            logfire.exception("Document could not be read")
            raise DocumentReadError from error

        return ExtractionResponse(text=text)
