"""Field definitions for registry documents.

Labels are tried in order; the first one that yields a value wins.
"""

from dataclasses import dataclass

from registry_extractor.services.resolver.labels import any_label_pattern

# Value shapes
LINE = r"[^\n]+"
CNPJ = r"(?<!\d)\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2}(?!\d)"
PHONE = r"(?<!\d)\(?\d{2}\)?[ .\-]?\d{4,5}[ .\-]?\d{4}(?!\d)"
EMAIL = r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}"
CEP = r"(?<!\d)\d{2}\.?\d{3}-?\d{3}(?!\d)"
UF = r"(?-i:[A-Z]{2})(?![^\W\d_])"
HOUSE_NUMBER = r"(?:S/?N(?!\w)|\d[\w\-/.]*)"

NUMERO_LABELS = ("NÚMERO", "Nº", "N°")

# Street name up to a comma, the end of the line or a house number label
STREET = rf"(?:(?!{any_label_pattern(NUMERO_LABELS)})[^\n,])+"


@dataclass(frozen=True)
class FieldSpec:
    """How to find one field.

    value_pattern: regex for the value next to a label
    shape: regex for the value anywhere in the text, used when no label matches
    reject: values matching this regex are ignored
    """

    name: str
    labels: tuple[str, ...]
    value_pattern: str = LINE
    shape: str | None = None
    reject: str | None = None


NOME = FieldSpec("nome", ("NOME EMPRESARIAL", "RAZÃO SOCIAL", "NOME"))
CNPJ_FIELD = FieldSpec("cnpj", ("CNPJ", "NÚMERO DE INSCRIÇÃO"), value_pattern=CNPJ, shape=CNPJ)
TELEFONE = FieldSpec("telefone", ("TELEFONE", "FONE", "TEL"), value_pattern=PHONE, shape=PHONE)
EMAIL_FIELD = FieldSpec(
    "email",
    ("ENDEREÇO ELETRÔNICO", "E-MAIL", "EMAIL"),
    value_pattern=EMAIL,
    shape=EMAIL,
)
LOGRADOURO = FieldSpec(
    "logradouro",
    ("LOGRADOURO", "ENDEREÇO", "RUA:"),
    value_pattern=STREET,
    # "ENDEREÇO ELETRÔNICO" is the e-mail label
    reject=r"^EL[EÉ]TR[OÔ]NICO",
)
NUMERO = FieldSpec("numero", NUMERO_LABELS, value_pattern=HOUSE_NUMBER)
COMPLEMENTO = FieldSpec("complemento", ("COMPLEMENTO", "COMPL"))
BAIRRO = FieldSpec("bairro", ("BAIRRO/DISTRITO", "BAIRRO", "DISTRITO"))
CEP_FIELD = FieldSpec("cep", ("CEP",), value_pattern=CEP)
CIDADE = FieldSpec("cidade", ("MUNICÍPIO", "CIDADE"))
ESTADO = FieldSpec("estado", ("UF", "ESTADO"), value_pattern=UF)

FIELDS: dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (
        NOME,
        CNPJ_FIELD,
        TELEFONE,
        EMAIL_FIELD,
        LOGRADOURO,
        NUMERO,
        COMPLEMENTO,
        BAIRRO,
        CEP_FIELD,
        CIDADE,
        ESTADO,
    )
}
