import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from pydantic import BaseModel

from registry_extractor.exceptions import (
    RETRY_MESSAGE,
    UnreadableDocumentError,
    UnsupportedDocumentError,
)
from registry_extractor.middleware.rate_limit import rate_limit_extract
from registry_extractor.routes.auth import get_current_session
from registry_extractor.services.extraction import ExtractionResult, ExtractionService
from registry_extractor.services.rendering import build_preview, render_all
from registry_extractor.services.sessions import NoDocumentSelectedError, UserSession

logger = logging.getLogger(__name__)

router = APIRouter()

extraction_service = ExtractionService()


def get_extraction_service() -> ExtractionService:
    return extraction_service


class AddressResponse(BaseModel):
    rua: str
    complemento: str
    bairro: str
    cep: str
    cidade: str
    estado: str
    pais: str


class RecordResponse(BaseModel):
    nome: str
    cnpj: str
    telefone: str
    email: str
    endereco: AddressResponse


class PreviewRow(BaseModel):
    label: str
    value: str


class PreviewSectionResponse(BaseModel):
    title: str
    rows: list[PreviewRow]


class ExtractionResponse(BaseModel):
    filename: str | None = None
    document_kind: str
    page_count: int
    record: RecordResponse
    snippets: dict[str, str]
    preview: list[PreviewSectionResponse]
    raw_text: str


class WorkspaceResponse(BaseModel):
    status: str
    generation: int
    filename: str | None = None
    size: int | None = None
    document_kind: str | None = None
    error: str | None = None
    result: ExtractionResponse | None = None


def build_extraction_response(
    result: ExtractionResult, filename: str | None = None
) -> ExtractionResponse:
    return ExtractionResponse(
        filename=filename,
        document_kind=str(result.document_kind),
        page_count=result.page_count,
        record=RecordResponse(**result.record.to_dict()),
        snippets=render_all(result.record),
        preview=[
            PreviewSectionResponse(
                title=section.title,
                rows=[PreviewRow(label=label, value=value) for label, value in section.rows],
            )
            for section in build_preview(result.record)
        ],
        raw_text=result.normalized_text,
    )


def build_workspace_response(session: UserSession) -> WorkspaceResponse:
    workspace = session.workspace
    document = workspace.document
    return WorkspaceResponse(
        status=str(workspace.status),
        generation=workspace.generation,
        filename=document.filename if document else None,
        size=document.size if document else None,
        document_kind=str(document.kind) if document else None,
        error=workspace.error,
        result=(
            build_extraction_response(workspace.result, document.filename if document else None)
            if workspace.result
            else None
        ),
    )


async def _read_upload(file: UploadFile, service: ExtractionService):
    try:
        kind = service.document_kind_for(file.content_type, file.filename)
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=415, detail=str(e)) from e
    return kind, await file.read()


@router.post("/extract", response_model=ExtractionResponse)
@rate_limit_extract()
async def extract_document(
    request: Request,
    file: UploadFile = File(...),
    session: UserSession = Depends(get_current_session),
    service: ExtractionService = Depends(get_extraction_service),
):
    """Extract a registry record from an uploaded file in one call."""
    kind, content = await _read_upload(file, service)

    try:
        result = await service.extract(content, kind)
    except UnreadableDocumentError as e:
        logger.warning(f"Unreadable upload {file.filename}: {e}")
        raise HTTPException(status_code=422, detail=RETRY_MESSAGE) from e

    return build_extraction_response(result, file.filename)


@router.get("/documents", response_model=WorkspaceResponse)
async def get_workspace(session: UserSession = Depends(get_current_session)):
    """Get the selected document and its latest result."""
    return build_workspace_response(session)


@router.put("/documents", response_model=WorkspaceResponse)
async def select_document(
    file: UploadFile = File(...),
    session: UserSession = Depends(get_current_session),
    service: ExtractionService = Depends(get_extraction_service),
):
    """Select a document, replacing any previous selection and result."""
    kind, content = await _read_upload(file, service)
    session.workspace.select(file.filename or "document", content, kind)
    return build_workspace_response(session)


@router.delete("/documents", response_model=WorkspaceResponse)
async def clear_document(session: UserSession = Depends(get_current_session)):
    """Clear the selection. A result still being processed will be discarded."""
    session.workspace.clear()
    return build_workspace_response(session)


@router.post("/documents/process", response_model=WorkspaceResponse)
@rate_limit_extract()
async def process_document(
    request: Request,
    session: UserSession = Depends(get_current_session),
    service: ExtractionService = Depends(get_extraction_service),
):
    """Process the selected document."""
    try:
        result = await session.workspace.process(service)
    except NoDocumentSelectedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except UnreadableDocumentError as e:
        raise HTTPException(status_code=422, detail=RETRY_MESSAGE) from e
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=415, detail=str(e)) from e

    if result is None:
        raise HTTPException(
            status_code=409, detail="Selection changed while processing; result discarded"
        )
    return build_workspace_response(session)
