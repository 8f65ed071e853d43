"""Data models for resolved registry records."""

from dataclasses import asdict, dataclass

COUNTRY = "Brasil"

# Shown in place of fields that could not be found
NOME_NOT_FOUND = "Nome não encontrado"
CNPJ_NOT_FOUND = "CNPJ não encontrado"
TELEFONE_NOT_FOUND = "Telefone não encontrado"
EMAIL_NOT_FOUND = "Email não encontrado"
RUA_NOT_FOUND = "Rua não encontrada"
COMPLEMENTO_NOT_FOUND = ""
BAIRRO_NOT_FOUND = "Bairro não encontrado"
CEP_NOT_FOUND = "CEP não encontrado"
CIDADE_NOT_FOUND = "Cidade não encontrada"
ESTADO_NOT_FOUND = "UF"


@dataclass(frozen=True)
class Address:
    """Street address of a company."""

    rua: str = RUA_NOT_FOUND
    complemento: str = COMPLEMENTO_NOT_FOUND
    bairro: str = BAIRRO_NOT_FOUND
    cep: str = CEP_NOT_FOUND
    cidade: str = CIDADE_NOT_FOUND
    estado: str = ESTADO_NOT_FOUND
    pais: str = COUNTRY


@dataclass(frozen=True)
class ExtractedRecord:
    """Company fields read from a registry document.

    Every field always holds a string: either the extracted value or the
    field's "not found" sentinel.
    """

    nome: str = NOME_NOT_FOUND
    cnpj: str = CNPJ_NOT_FOUND
    telefone: str = TELEFONE_NOT_FOUND
    email: str = EMAIL_NOT_FOUND
    endereco: Address = Address()

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class FieldMatch:
    """A resolved field value and how it was found."""

    value: str
    strategy: str
    label: str | None = None
