"""Resolution of registry fields from normalized document text."""

import logging
from collections.abc import Callable, Sequence

from registry_extractor.services.resolver import models
from registry_extractor.services.resolver.fields import FIELDS, FieldSpec
from registry_extractor.services.resolver.models import Address, ExtractedRecord, FieldMatch
from registry_extractor.services.resolver.strategies import DEFAULT_STRATEGIES

logger = logging.getLogger(__name__)

Strategy = Callable[[str, FieldSpec], FieldMatch | None]


def compose_street(logradouro: str | None, numero: str | None) -> str:
    """Join street name and house number, skipping whichever is missing."""
    parts = [part for part in (logradouro, numero) if part]
    if not parts:
        return models.RUA_NOT_FOUND
    return " ".join(parts)


class FieldResolver:
    """Resolve every registry field from text using ordered strategies.

    Strategies are tried in order for each field and the first value found
    wins. Fields nobody finds fall back to their sentinel, so resolve() always
    returns a complete record.
    """

    def __init__(
        self,
        fields: dict[str, FieldSpec] | None = None,
        strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    ):
        self.fields = fields or FIELDS
        self.strategies = tuple(strategies)

    def match_field(self, text: str, name: str) -> FieldMatch | None:
        """Find one field's value, or None if no strategy finds it."""
        spec = self.fields[name]
        for strategy in self.strategies:
            match = strategy(text, spec)
            if match:
                return match
        return None

    def trace(self, text: str) -> dict[str, FieldMatch | None]:
        """Match every field and report which strategy and label found it."""
        return {name: self.match_field(text, name) for name in self.fields}

    def resolve(self, text: str) -> ExtractedRecord:
        """Build a record from text. Never raises."""
        matches = self.trace(text)

        def value(name: str, sentinel: str) -> str:
            match = matches.get(name)
            return match.value if match else sentinel

        logradouro = matches.get("logradouro")
        numero = matches.get("numero")

        record = ExtractedRecord(
            nome=value("nome", models.NOME_NOT_FOUND),
            cnpj=value("cnpj", models.CNPJ_NOT_FOUND),
            telefone=value("telefone", models.TELEFONE_NOT_FOUND),
            email=value("email", models.EMAIL_NOT_FOUND),
            endereco=Address(
                rua=compose_street(
                    logradouro.value if logradouro else None,
                    numero.value if numero else None,
                ),
                complemento=value("complemento", models.COMPLEMENTO_NOT_FOUND),
                bairro=value("bairro", models.BAIRRO_NOT_FOUND),
                cep=value("cep", models.CEP_NOT_FOUND),
                cidade=value("cidade", models.CIDADE_NOT_FOUND),
                estado=value("estado", models.ESTADO_NOT_FOUND),
                pais=models.COUNTRY,
            ),
        )

        found = sum(1 for match in matches.values() if match)
        logger.debug(f"Resolved {found}/{len(matches)} fields")
        return record


_default_resolver = FieldResolver()


def resolve(text: str) -> ExtractedRecord:
    """Resolve a record with the default field table."""
    return _default_resolver.resolve(text)
