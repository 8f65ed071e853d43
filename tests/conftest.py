"""Test configuration and fixtures."""

import os
import uuid
from collections.abc import AsyncGenerator, Callable
from datetime import UTC, datetime, timedelta

import fitz
import pytest
from httpx import ASGITransport, AsyncClient

# Override settings before importing app modules
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LINE_BREAK_THRESHOLD"] = "5"
os.environ["USE_PDF_LINE_FLAGS"] = "true"
os.environ["FRONTEND_URL"] = "http://localhost:3000"

from registry_extractor.routes.auth import get_session_store
from registry_extractor.services.sessions import SessionStore, UserSession
from main import app

REGISTRY_TEXT = """REPÚBLICA FEDERATIVA DO BRASIL
CADASTRO NACIONAL DA PESSOA JURÍDICA
NÚMERO DE INSCRIÇÃO
12.345.678/0001-90
MATRIZ
COMPROVANTE DE INSCRIÇÃO E DE SITUAÇÃO CADASTRAL
DATA DE ABERTURA
01/02/2010
NOME EMPRESARIAL
ACME COMERCIO DE ALIMENTOS LTDA
TÍTULO DO ESTABELECIMENTO (NOME DE FANTASIA)
ACME
LOGRADOURO
R DAS FLORES
NÚMERO
123
COMPLEMENTO
SALA 4
CEP
01.310-100
BAIRRO/DISTRITO
BELA VISTA
MUNICÍPIO
SAO PAULO
UF
SP
ENDEREÇO ELETRÔNICO
contato@acme.com.br
TELEFONE
(11) 4002-8922
"""


@pytest.fixture
def registry_text() -> str:
    """Linearized text of a typical CNPJ registration card."""
    return REGISTRY_TEXT


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Build a PDF in memory.

    Each page is a list of (x, y, text) lines; every line is inserted as its
    own text run, so PyMuPDF reports it as a separate line.
    """

    def _make_pdf(*pages: list[tuple[float, float, str]]) -> bytes:
        doc = fitz.open()
        for lines in pages:
            page = doc.new_page()
            for x, y, text in lines:
                page.insert_text((x, y), text, fontsize=11)
        data = doc.tobytes()
        doc.close()
        return data

    return _make_pdf


@pytest.fixture
def registry_pdf(make_pdf) -> bytes:
    """Registry card with one label or value per line (ASCII labels)."""
    lines = [
        "NUMERO DE INSCRICAO",
        "12.345.678/0001-90",
        "NOME EMPRESARIAL",
        "ACME COMERCIO DE ALIMENTOS LTDA",
        "LOGRADOURO",
        "R DAS FLORES",
        "NUMERO",
        "123",
        "CEP",
        "01.310-100",
        "BAIRRO/DISTRITO",
        "BELA VISTA",
        "MUNICIPIO",
        "SAO PAULO",
        "UF",
        "SP",
        "ENDERECO ELETRONICO",
        "contato@acme.com.br",
        "TELEFONE",
        "(11) 4002-8922",
    ]
    return make_pdf([(72, 72 + 20 * i, text) for i, text in enumerate(lines)])


@pytest.fixture
def session_store() -> SessionStore:
    """A fresh session store for each test."""
    return SessionStore(expire_hours=1)


@pytest.fixture
async def client(session_store: SessionStore) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client."""
    app.dependency_overrides[get_session_store] = lambda: session_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def test_session(session_store: SessionStore) -> UserSession:
    """Create a live session."""
    return session_store.create("tester@example.com")


@pytest.fixture
def expired_session(session_store: SessionStore) -> UserSession:
    """Create an expired session."""
    session = session_store.create("expired@example.com")
    session.expires_at = datetime.now(UTC) - timedelta(hours=1)
    return session


@pytest.fixture
async def auth_client(client: AsyncClient, test_session: UserSession) -> AsyncClient:
    """Create an authenticated test client with session cookie."""
    client.cookies.set("session_id", str(test_session.id))
    return client


@pytest.fixture
def unknown_session_id() -> str:
    return str(uuid.uuid4())
