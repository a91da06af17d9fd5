import io
import threading
from pathlib import Path
from unittest import mock

import pytest

from enums import DocumentType
from exceptions import (
    DocumentCorruptedError,
    DocumentMissingError,
    DocumentNotSupportedError,
    DocumentReadError,
    DocumentTooLargeError,
)
from settings import core_settings
from usecases import DocumentUsecase


class TestDocumentUsecase:
    @pytest.fixture(autouse=True)
    def _usecase(self, tmp_path: Path) -> None:
        self.upload_dir = tmp_path / "uploads"
        self.usecase = DocumentUsecase(upload_dir=self.upload_dir)

    def assert_no_leftovers(self) -> None:
        assert not self.upload_dir.exists() or list(self.upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_txt(self) -> None:
        content = b"hello world"

        response = await self.usecase.extract_document(
            file=io.BytesIO(content),
            file_size=len(content),
            content_type=DocumentType.TXT.value,
        )

        assert response.text == "hello world"
        self.assert_no_leftovers()

    @pytest.mark.asyncio
    async def test_corrupt_pdf_removes_transient_file(self) -> None:
        content = b"%PDF-1.7 garbage without structure"

        with pytest.raises(DocumentCorruptedError):
            await self.usecase.extract_document(
                file=io.BytesIO(content),
                file_size=len(content),
                content_type=DocumentType.PDF.value,
            )

        self.assert_no_leftovers()

    @pytest.mark.asyncio
    async def test_io_failure(self) -> None:
        content = b"hello world"

        with mock.patch(
            "usecases.document.extract_text", side_effect=OSError("disk gone")
        ):
            with pytest.raises(DocumentReadError):
                await self.usecase.extract_document(
                    file=io.BytesIO(content),
                    file_size=len(content),
                    content_type=DocumentType.TXT.value,
                )

        self.assert_no_leftovers()

    @pytest.mark.asyncio
    async def test_missing_file(self) -> None:
        with pytest.raises(DocumentMissingError):
            await self.usecase.extract_document(
                file=None, file_size=None, content_type=None
            )

    @pytest.mark.asyncio
    async def test_unsupported_type_is_rejected_before_reading(self) -> None:
        file = mock.Mock()

        with pytest.raises(DocumentNotSupportedError):
            await self.usecase.extract_document(
                file=file, file_size=10, content_type="application/zip"
            )

        file.read.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("file_size", [0, core_settings.max_file_size + 1])
    async def test_size_limits(self, file_size: int) -> None:
        with pytest.raises(DocumentTooLargeError):
            await self.usecase.extract_document(
                file=io.BytesIO(b"x"),
                file_size=file_size,
                content_type=DocumentType.TXT.value,
            )

    @pytest.mark.asyncio
    async def test_upload_is_read_in_worker_thread(self) -> None:
        content = b"hello world"
        read_threads = []

        def read() -> bytes:
            read_threads.append(threading.current_thread())
            return content

        file = mock.Mock()
        file.read.side_effect = read

        response = await self.usecase.extract_document(
            file=file,
            file_size=len(content),
            content_type=DocumentType.TXT.value,
        )

        assert response.text == "hello world"
        assert read_threads
        assert read_threads[0] is not threading.main_thread()
        self.assert_no_leftovers()
