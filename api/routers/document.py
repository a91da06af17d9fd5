from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from api.dependencies import auth, document
from schemas import ExtractionResponse

router = APIRouter(prefix="/api", tags=["Document"])


@router.post(
    path="/upload-file", dependencies=[Depends(dependency=auth.get_identity)]
)
async def upload_file(
    usecase: Annotated[
        document.DocumentUsecase, Depends(dependency=document.get_document_usecase)
    ],
    file: Annotated[UploadFile | None, File()] = None,
) -> ExtractionResponse:
    return await usecase.extract_document(
        file=file.file if file else None,
        file_size=file.size if file else None,
        content_type=file.content_type if file else None,
    )
