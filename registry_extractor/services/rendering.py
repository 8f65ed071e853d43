"""Rendering of extracted records as code snippets and a preview.

Values are opaque strings from the document. Every value is JSON-encoded
before it is placed in a snippet, so quotes and backslashes cannot break the
generated code.
"""

import json
from dataclasses import dataclass

from registry_extractor.enums import SnippetFormat
from registry_extractor.services.resolver.models import ExtractedRecord

LOGO_URL = "../images/logo.png"

PARTNER_BANKS = [
    "Banco Santander (Brasil) S.A., CNPJ 90.400.888/0001-42",
    "Caixa Econômica Federal, CNPJ 00.360.305/0001-04",
    "Banco Itaú Unibanco, CNPJ 60.701.190/0001-04",
    "Banco do Brasil, CNPJ 00.000.000/0001-91",
    "Banco Bradesco, CNPJ 60.746.948/0001-12",
]


def _js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_javascript(record: ExtractedRecord) -> str:
    """Render the record as the `var empresa = {...};` object literal."""
    endereco = record.endereco
    banks = "\n".join(f"    {_js_string(bank)}," for bank in PARTNER_BANKS)

    return f"""var empresa = {{
  nome: {_js_string(record.nome)},
  cnpj: {_js_string(record.cnpj)},
  telefone: {_js_string(record.telefone)},
  email: {_js_string(record.email)},
  logo_url: {_js_string(LOGO_URL)},
  endereco: {{
    rua: {_js_string(endereco.rua)},
    complemento: {_js_string(endereco.complemento)},
    bairro: {_js_string(endereco.bairro)},
    cep: {_js_string(endereco.cep)},
    cidade: {_js_string(endereco.cidade)},
    estado: {_js_string(endereco.estado)},
    pais: {_js_string(endereco.pais)},
  }},
  bancosParceiros: [
{banks}
  ],
}};"""


def render_json(record: ExtractedRecord) -> str:
    """Render the record as indented JSON."""
    return json.dumps(record.to_dict(), ensure_ascii=False, indent=2)


_RENDERERS = {
    SnippetFormat.JAVASCRIPT: render_javascript,
    SnippetFormat.JSON: render_json,
}


def render_snippet(record: ExtractedRecord, fmt: SnippetFormat) -> str:
    """Render the record in the requested snippet format."""
    return _RENDERERS[SnippetFormat(fmt)](record)


def render_all(record: ExtractedRecord) -> dict[str, str]:
    """Render the record in every snippet format, keyed by format name."""
    return {str(fmt): render(record) for fmt, render in _RENDERERS.items()}


@dataclass(frozen=True)
class PreviewSection:
    """A titled group of label/value rows."""

    title: str
    rows: list[tuple[str, str]]


def build_preview(record: ExtractedRecord) -> list[PreviewSection]:
    """Lay out the record for display. Complemento is shown only when present."""
    endereco = record.endereco

    address_rows = [("Rua", endereco.rua)]
    if endereco.complemento:
        address_rows.append(("Complemento", endereco.complemento))
    address_rows += [
        ("Bairro", endereco.bairro),
        ("CEP", endereco.cep),
        ("Cidade", endereco.cidade),
        ("Estado", endereco.estado),
    ]

    return [
        PreviewSection(
            title="Dados da Empresa",
            rows=[
                ("Nome", record.nome),
                ("CNPJ", record.cnpj),
                ("Telefone", record.telefone),
                ("E-mail", record.email),
            ],
        ),
        PreviewSection(title="Endereço", rows=address_rows),
    ]


def render_preview_text(record: ExtractedRecord) -> str:
    """Plain-text version of the preview, one "Label: value" row per line."""
    lines = []
    for section in build_preview(record):
        if lines:
            lines.append("")
        lines.append(section.title)
        lines.extend(f"  {label}: {value}" for label, value in section.rows)
    return "\n".join(lines)
