"""In-memory login sessions and their document workspaces."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from registry_extractor.config import settings
from registry_extractor.enums import DocumentKind, WorkspaceStatus
from registry_extractor.exceptions import RETRY_MESSAGE, ExtractionError
from registry_extractor.services.extraction import ExtractionResult, ExtractionService

logger = logging.getLogger(__name__)


class NoDocumentSelectedError(Exception):
    """Processing was requested with no document selected."""

    pass


@dataclass
class SelectedDocument:
    filename: str
    content: bytes
    kind: DocumentKind

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class DocumentWorkspace:
    """The document a user is working on and the result of processing it.

    Every selection change bumps generation. A result is only applied if the
    generation is still the one that was current when processing started, so
    a slow decode can never overwrite a newer selection.
    """

    document: SelectedDocument | None = None
    generation: int = 0
    status: WorkspaceStatus = WorkspaceStatus.EMPTY
    result: ExtractionResult | None = None
    error: str | None = None

    def select(self, filename: str, content: bytes, kind: DocumentKind) -> int:
        """Select a new document, dropping any previous result."""
        self.document = SelectedDocument(filename=filename, content=content, kind=kind)
        self._reset(WorkspaceStatus.SELECTED)
        return self.generation

    def clear(self) -> int:
        """Clear the selection. In-flight processing results will be discarded."""
        self.document = None
        self._reset(WorkspaceStatus.EMPTY)
        return self.generation

    def _reset(self, status: WorkspaceStatus) -> None:
        self.generation += 1
        self.status = status
        self.result = None
        self.error = None

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    async def process(self, service: ExtractionService) -> ExtractionResult | None:
        """
        Extract the selected document.

        Returns:
            The result, or None if the selection changed while processing

        Raises:
            NoDocumentSelectedError: if no document is selected
            ExtractionError: if the document could not be read
        """
        if self.document is None:
            raise NoDocumentSelectedError("No document selected")

        generation = self.generation
        document = self.document
        self.status = WorkspaceStatus.PROCESSING
        self.result = None
        self.error = None

        try:
            result = await service.extract(document.content, document.kind)
        except ExtractionError as e:
            if not self.is_current(generation):
                logger.info(f"Discarding failure for stale selection {document.filename}")
                return None
            self.status = WorkspaceStatus.FAILED
            self.error = RETRY_MESSAGE
            logger.warning(f"Extraction failed for {document.filename}: {e}")
            raise
        except asyncio.CancelledError:
            if self.is_current(generation):
                self.status = WorkspaceStatus.SELECTED
            raise

        if not self.is_current(generation):
            logger.info(
                f"Discarding stale result for {document.filename}",
                extra={"generation": generation, "current_generation": self.generation},
            )
            return None

        self.status = WorkspaceStatus.READY
        self.result = result
        return result


@dataclass
class UserSession:
    id: uuid.UUID
    email: str
    created_at: datetime
    expires_at: datetime
    workspace: DocumentWorkspace = field(default_factory=DocumentWorkspace)

    @property
    def is_expired(self) -> bool:
        return self.expires_at < datetime.now(UTC)


class SessionStore:
    """Keeps login sessions in process memory."""

    def __init__(self, expire_hours: int | None = None):
        self.expire_hours = expire_hours or settings.session_expire_hours
        self._sessions: dict[uuid.UUID, UserSession] = {}

    def create(self, email: str) -> UserSession:
        self._purge_expired()
        now = datetime.now(UTC)
        session = UserSession(
            id=uuid.uuid4(),
            email=email,
            created_at=now,
            expires_at=now + timedelta(hours=self.expire_hours),
        )
        self._sessions[session.id] = session
        logger.info(f"Created session {session.id} for {email}")
        return session

    def get(self, session_id: uuid.UUID) -> UserSession | None:
        """Return a live session. Expired sessions are removed."""
        session = self._sessions.get(session_id)
        if session and session.is_expired:
            self.delete(session_id)
            return None
        return session

    def delete(self, session_id: uuid.UUID) -> None:
        self._sessions.pop(session_id, None)

    def _purge_expired(self) -> None:
        expired = [sid for sid, session in self._sessions.items() if session.is_expired]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Removed {len(expired)} expired sessions")

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
