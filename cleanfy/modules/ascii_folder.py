"""Module: ascii_folder.py

Author: Michael Economou
Date: 2026-09-16

Folds Unicode text to printable ASCII.

The text is decomposed with NFKD so that precomposed accented letters split
into a base letter plus combining marks; the marks are dropped. Characters
that survive decomposition but are still outside ASCII are looked up in a
small fixed table (ligatures, stroked letters, typographic dashes and
quotes). Anything not in the table becomes a single placeholder, so the
position of an unknown character is kept even though its content is lost.
"""

import unicodedata
from collections.abc import Mapping
from types import MappingProxyType

from cleanfy.config import PLACEHOLDER_CHAR
from cleanfy.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def _expand(chars: str, replacement: str) -> dict[str, str]:
    return dict.fromkeys(chars, replacement)


DEFAULT_FOLD_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "ß": "ss",
        **_expand("ÆǼæǽ", "ae"),
        **_expand("Œœ", "oe"),
        **_expand("ĐđÐð", "d"),
        **_expand("Łł", "l"),
        "₫": "d",
        # En dash, em dash
        **_expand("–—", "-"),
        # Curly double quotes, low quote, guillemets, prime, double prime
        **_expand("“”„«»′″", "'"),
        # Middle dot, bullet, bullet operator
        **_expand("·•∙", "-"),
    }
)


class AsciiFolder:
    """Unicode to ASCII folder driven by a read-only substitution table."""

    def __init__(
        self,
        table: Mapping[str, str] = DEFAULT_FOLD_TABLE,
        placeholder: str = PLACEHOLDER_CHAR,
    ) -> None:
        for key, value in table.items():
            if not _is_printable_ascii(value):
                raise ValueError(f"fold table maps {key!r} to non-ASCII text {value!r}")
        if not _is_printable_ascii(placeholder):
            raise ValueError(f"placeholder must be printable ASCII, got {placeholder!r}")

        self._table = table if isinstance(table, MappingProxyType) else MappingProxyType(dict(table))
        self._placeholder = placeholder

    @property
    def table(self) -> Mapping[str, str]:
        return self._table

    def fold(self, text: str) -> str:
        """Return ``text`` reduced to code points in the range [32, 127]."""
        if not text:
            return text

        out: list[str] = []
        for char in unicodedata.normalize("NFKD", text):
            if unicodedata.category(char) == "Mn":
                continue
            code = ord(char)
            if code < 128:
                if code >= 32:
                    out.append(char)
                continue
            out.append(self._table.get(char, self._placeholder))

        folded = "".join(out)
        if folded != text:
            logger.debug("[AsciiFolder] %r -> %r", text, folded)
        return folded


def _is_printable_ascii(value: str) -> bool:
    return all(32 <= ord(c) < 128 for c in value)


_default_folder = AsciiFolder()


def fold_ascii(text: str) -> str:
    """Fold ``text`` with the default table."""
    return _default_folder.fold(text)
