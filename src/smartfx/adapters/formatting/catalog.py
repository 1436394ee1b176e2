"""
Currency Catalog - Display Metadata for Known Currencies

This module holds the descriptive currency records (name and symbol) shown
by the interactive shell. The catalog is seeded once at startup and never
changes; it is independent of the codes the rate provider supports.

Files that USE this module:
- smartfx.app (builds the default catalog)
- smartfx.adapters.cli.shell (looks up names and symbols)
- smartfx.adapters.formatting.formatter (currency table rows)

Files that this module USES:
- smartfx.domain.models (Currency records)
- smartfx.shared.validators (normalize_code)
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from smartfx.domain.models import Currency
from smartfx.shared.validators import normalize_code

SEED_CURRENCIES = (
    Currency("USD", "US Dollar", "$"),
    Currency("EUR", "Euro", "€"),
    Currency("INR", "Indian Rupee", "₹"),
    Currency("GBP", "British Pound", "£"),
    Currency("JPY", "Japanese Yen", "¥"),
    Currency("AUD", "Australian Dollar", "$"),
    Currency("CAD", "Canadian Dollar", "$"),
)


class CurrencyCatalog:
    """Read-only mapping of code to Currency record."""

    def __init__(self, currencies: Iterable[Currency] = SEED_CURRENCIES):
        entries = {normalize_code(c.code): c for c in currencies}
        self._entries: Mapping[str, Currency] = MappingProxyType(entries)

    def get(self, code: str) -> Optional[Currency]:
        return self._entries.get(normalize_code(code))

    def codes(self) -> frozenset:
        return frozenset(self._entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_code(code) in self._entries

    def __iter__(self) -> Iterator[Currency]:
        return iter(sorted(self._entries.values(), key=lambda c: c.code))

    def __len__(self) -> int:
        return len(self._entries)
