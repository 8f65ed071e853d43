"""Label regexes that tolerate accents, case and internal spacing."""

import re
import unicodedata

# Accented letters that registry documents use interchangeably with plain ones
_ACCENT_VARIANTS = {
    "A": "AÁÀÂÃÄ",
    "C": "CÇ",
    "E": "EÉÈÊË",
    "I": "IÍÌÎÏ",
    "N": "NÑ",
    "O": "OÓÒÔÕÖ",
    "U": "UÚÙÛÜ",
}

_SPACES = r"[ \t]*"


def _base_letter(char: str) -> str:
    decomposed = unicodedata.normalize("NFD", char)
    return decomposed[0].upper()


def label_pattern(label: str) -> str:
    """Build a regex for a label that ignores accents and internal spacing.

    "NÚMERO" matches "NUMERO", "Número" and "N Ú M E R O"; matches only as a
    whole word, and not right after an opening parenthesis, where a label word
    only qualifies the heading before it, as in "(NOME DE FANTASIA)".
    """
    parts = []
    for char in label:
        if char.isspace():
            continue
        variants = _ACCENT_VARIANTS.get(_base_letter(char))
        parts.append(f"[{variants}]" if variants else re.escape(char))
    return r"(?<![\w(])" + _SPACES.join(parts) + r"(?!\w)"


def any_label_pattern(labels) -> str:
    """One alternation matching any of the labels, longest first."""
    ordered = sorted(set(labels), key=len, reverse=True)
    return "(?:" + "|".join(label_pattern(label) for label in ordered) + ")"
