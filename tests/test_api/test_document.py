import io
from http import HTTPStatus
from pathlib import Path
from typing import Generator
from unittest import mock

import docx
import pytest

from api.dependencies import document
from enums import DocumentType
from main import app
from tests.base import BaseTestCase
from tests.factories import UserFactory
from usecases import DocumentUsecase


class TestUploadFile(BaseTestCase):
    url = "/api/upload-file"

    @pytest.fixture(autouse=True)
    def _upload_dir(self, tmp_path: Path) -> Generator[Path, None, None]:
        def override_get_document_usecase() -> DocumentUsecase:
            return DocumentUsecase(upload_dir=tmp_path)

        app.dependency_overrides[document.get_document_usecase] = (
            override_get_document_usecase
        )
        self.upload_dir = tmp_path
        yield tmp_path
        app.dependency_overrides.pop(document.get_document_usecase, None)

    @pytest.mark.asyncio
    async def test_register_login_upload_txt(self) -> None:
        await self.register(username="alice", password="pw1")
        login = await self.client.post(
            url="/api/auth/login", json={"username": "alice", "password": "pw1"}
        )
        token = (await self.assert_response_ok(response=login))["token"]

        response = await self.client.post(
            url=self.url,
            files={"file": ("note.txt", b"hello world", DocumentType.TXT.value)},
            headers={"Authorization": f"Bearer {token}"},
        )

        data = await self.assert_response_ok(response=response)
        assert data == {"text": "hello world"}
        assert list(self.upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_docx(self) -> None:
        user = await UserFactory.create_async(session=self.session)
        buffer = io.BytesIO()
        word_document = docx.Document()
        word_document.add_paragraph("First paragraph")
        word_document.add_paragraph("Second paragraph")
        word_document.save(buffer)

        response = await self.client.post(
            url=self.url,
            files={"file": ("note.docx", buffer.getvalue(), DocumentType.DOCX.value)},
            headers=self.auth_headers(user_id=user.id),
        )

        data = await self.assert_response_ok(response=response)
        assert data["text"] == "First paragraph\nSecond paragraph"

    @pytest.mark.asyncio
    async def test_corrupt_pdf(self) -> None:
        user = await UserFactory.create_async(session=self.session)

        response = await self.client.post(
            url=self.url,
            files={"file": ("broken.pdf", b"not a pdf at all", DocumentType.PDF.value)},
            headers=self.auth_headers(user_id=user.id),
        )

        await self.assert_response_error(
            response=response, status_code=HTTPStatus.UNPROCESSABLE_ENTITY
        )
        assert list(self.upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_unsupported_type(self) -> None:
        user = await UserFactory.create_async(session=self.session)

        response = await self.client.post(
            url=self.url,
            files={"file": ("image.png", b"\x89PNG\r\n", "image/png")},
            headers=self.auth_headers(user_id=user.id),
        )

        detail = await self.assert_response_error(
            response=response, status_code=HTTPStatus.BAD_REQUEST
        )
        assert detail == "Please upload a PDF, DOCX, or TXT file"

    @pytest.mark.asyncio
    async def test_no_file(self) -> None:
        user = await UserFactory.create_async(session=self.session)

        response = await self.client.post(
            url=self.url,
            data={"note": "nothing attached"},
            headers=self.auth_headers(user_id=user.id),
        )

        detail = await self.assert_response_error(
            response=response, status_code=HTTPStatus.BAD_REQUEST
        )
        assert detail == "No file uploaded"

    @pytest.mark.asyncio
    async def test_unauthenticated(self) -> None:
        with mock.patch("usecases.document.extract_text") as mock_extract_text:
            response = await self.client.post(
                url=self.url,
                files={"file": ("note.txt", b"hello world", DocumentType.TXT.value)},
            )

        await self.assert_response_error(
            response=response, status_code=HTTPStatus.UNAUTHORIZED
        )
        mock_extract_text.assert_not_called()
