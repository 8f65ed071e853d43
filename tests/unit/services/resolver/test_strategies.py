"""Tests for the individual label matching strategies."""

import re

import pytest

from registry_extractor.services.resolver import (
    FIELDS,
    FieldSpec,
    label_pattern,
    label_same_line,
    label_then_newline,
    shape_anywhere,
)
from registry_extractor.services.resolver.strategies import clean_value


class TestLabelPattern:
    """Tests for label_pattern."""

    @pytest.mark.parametrize(
        "text",
        ["NÚMERO", "NUMERO", "número", "N Ú M E R O", "N U M E R O"],
    )
    def test_matches_variants(self, text):
        assert re.search(label_pattern("NÚMERO"), text, re.IGNORECASE)

    def test_plain_label_matches_accented_text(self):
        assert re.search(label_pattern("ENDERECO"), "ENDEREÇO", re.IGNORECASE)

    @pytest.mark.parametrize("text", ["NUMERAL", "ENUMERO", "NUMEROS"])
    def test_whole_word_only(self, text):
        assert not re.search(label_pattern("NÚMERO"), text, re.IGNORECASE)

    def test_punctuation_escaped(self):
        pattern = label_pattern("BAIRRO/DISTRITO")

        assert re.search(pattern, "BAIRRO/DISTRITO", re.IGNORECASE)
        assert not re.search(pattern, "BAIRRO DISTRITO", re.IGNORECASE)

    def test_not_right_after_opening_parenthesis(self):
        pattern = label_pattern("NOME")

        assert not re.search(pattern, "(NOME DE FANTASIA)", re.IGNORECASE)
        assert re.search(pattern, "( NOME )", re.IGNORECASE)


class TestCleanValue:
    """Tests for clean_value."""

    def test_strips_whitespace(self):
        assert clean_value("  Centro  ", FIELDS["bairro"]) == "Centro"

    @pytest.mark.parametrize("raw", ["", "   ", "********", "***.***", "---", "."])
    def test_placeholders_rejected(self, raw):
        assert clean_value(raw, FIELDS["complemento"]) is None

    def test_reject_pattern(self):
        assert clean_value("ELETRÔNICO", FIELDS["logradouro"]) is None
        assert clean_value("Rua Direita", FIELDS["logradouro"]) == "Rua Direita"

    @pytest.mark.parametrize(
        "raw",
        ["UF", "MUNICÍPIO UF", "BAIRRO/DISTRITO", "NOME: ACME", "Município - SP", "CEP BAIRRO"],
    )
    def test_label_headings_rejected(self, raw):
        assert clean_value(raw, FIELDS["cidade"]) is None

    @pytest.mark.parametrize("raw", ["Cidade Nova", "Nº 5", "Estado Maior 10", "Rua Direita"])
    def test_values_starting_with_label_word_kept(self, raw):
        assert clean_value(raw, FIELDS["complemento"]) == raw


class TestLabelThenNewline:
    """Tests for label_then_newline."""

    def test_value_on_next_line(self):
        match = label_then_newline("CEP\n01310-100", FIELDS["cep"])

        assert match.value == "01310-100"
        assert match.strategy == "label_then_newline"
        assert match.label == "CEP"

    def test_colon_before_line_break(self):
        match = label_then_newline("MUNICÍPIO:\nSAO PAULO", FIELDS["cidade"])

        assert match.value == "SAO PAULO"

    def test_ignores_same_line_values(self):
        assert label_then_newline("CEP: 01310-100", FIELDS["cep"]) is None

    def test_skips_placeholder_and_keeps_looking(self):
        text = "COMPLEMENTO\n***\nCOMPLEMENTO\nSALA 4"

        assert label_then_newline(text, FIELDS["complemento"]).value == "SALA 4"

    def test_labels_tried_in_order(self):
        text = "BAIRRO\nVila Antiga\nBAIRRO/DISTRITO\nCentro"

        match = label_then_newline(text, FIELDS["bairro"])

        assert match.value == "Centro"
        assert match.label == "BAIRRO/DISTRITO"


class TestLabelSameLine:
    """Tests for label_same_line."""

    @pytest.mark.parametrize(
        "text",
        ["TELEFONE: (11) 4002-8922", "TELEFONE - (11) 4002-8922", "TELEFONE (11) 4002-8922"],
    )
    def test_separators(self, text):
        match = label_same_line(text, FIELDS["telefone"])

        assert match.value == "(11) 4002-8922"
        assert match.strategy == "label_same_line"

    def test_value_must_be_on_same_line(self):
        assert label_same_line("TELEFONE\n(11) 4002-8922", FIELDS["telefone"]) is None

    def test_value_must_fit_pattern(self):
        assert label_same_line("CEP: não informado", FIELDS["cep"]) is None

    @pytest.mark.parametrize(
        "text",
        ["LOGRADOURO: Rua das Flores NÚMERO: 123", "Endereço: Rua das Flores nº 123"],
    )
    def test_street_stops_before_number_label(self, text):
        match = label_same_line(text, FIELDS["logradouro"])

        assert match.value == "Rua das Flores"

    def test_rua_label_needs_colon(self):
        assert label_same_line("Rua: Augusta, 500", FIELDS["logradouro"]).value == "Augusta"
        assert label_same_line("Rua Augusta, 500", FIELDS["logradouro"]) is None


class TestShapeAnywhere:
    """Tests for shape_anywhere."""

    def test_finds_shape_without_label(self):
        match = shape_anywhere("Contato: vendas@acme.com.br", FIELDS["email"])

        assert match.value == "vendas@acme.com.br"
        assert match.strategy == "shape_anywhere"
        assert match.label is None

    def test_fields_without_shape_skip(self):
        assert shape_anywhere("Centro", FIELDS["bairro"]) is None

    def test_cnpj_digits_not_embedded_in_longer_number(self):
        assert shape_anywhere("Protocolo 9912345678000190", FIELDS["cnpj"]) is None

    def test_custom_field_spec(self):
        spec = FieldSpec("protocolo", ("PROTOCOLO",), shape=r"\d{6}")

        assert shape_anywhere("ref 123456", spec).value == "123456"
