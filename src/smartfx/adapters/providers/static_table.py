"""
Static Table Provider - In-Memory Rate Table with Overrides

This module implements a rate provider backed by a fixed table of rates
quoted against a single base currency. Any pair is resolved by triangulating
through the base; a directly quoted rate can be set for a specific ordered
pair to bypass triangulation.

The seed rates below are approximate example values, not market data.
Nothing refreshes them from a network or a file.

Files that USE this module:
- smartfx.app (builds the StaticTableProvider at startup)
- smartfx.adapters.cli.shell (registers currencies and custom rates)
- tests.test_providers (unit tests)

Files that this module USES:
- smartfx.adapters.providers.base (RateProvider interface)
- smartfx.domain.errors (UnsupportedCurrencyError, InvalidRateError)
- smartfx.domain.models (CurrencyPair override keys)
- smartfx.shared.validators (normalize_code)
"""
from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional

from smartfx.adapters.providers.base import RateProvider
from smartfx.domain.errors import InvalidRateError, UnsupportedCurrencyError
from smartfx.domain.models import CurrencyPair
from smartfx.shared.validators import normalize_code

logger = logging.getLogger(__name__)

# Example rates, 1 USD = value units of code (approximate, for demo only)
DEFAULT_SEED_BASE = "USD"
DEFAULT_SEED_RATES: Mapping[str, float] = {
    "USD": 1.0,
    "EUR": 0.92,
    "INR": 83.10,
    "GBP": 0.79,
    "JPY": 141.50,
    "AUD": 1.47,
    "CAD": 1.34,
}


def _rebase(seed_rates: Mapping[str, float], seed_base: str, base: str) -> Dict[str, float]:
    """
    Re-express seed rates against a different base currency.

    Args:
        seed_rates: Rates quoted as 1 seed_base = value units of code
        seed_base: Base the seed rates are quoted against
        base: New base currency

    Returns:
        Rates quoted as 1 base = value units of code, with base pinned to 1.0

    Raises:
        UnsupportedCurrencyError: If base has no seed rate to rebase through
    """
    rates = {normalize_code(code): float(value) for code, value in seed_rates.items()}
    rates.setdefault(seed_base, 1.0)
    if base != seed_base:
        if base not in rates:
            raise UnsupportedCurrencyError([base])
        pivot = rates[base]
        rates = {code: value / pivot for code, value in rates.items()}
    rates[base] = 1.0
    return rates


class StaticTableProvider(RateProvider):
    """
    Rate provider backed by an in-memory rate table and an override table.

    Both tables are owned by the instance and guarded by one lock, so a
    provider shared between threads never interleaves a read with a write.
    """

    def __init__(
        self,
        base_currency: str = DEFAULT_SEED_BASE,
        seed_rates: Optional[Mapping[str, float]] = None,
        seed_base: str = DEFAULT_SEED_BASE,
    ):
        """
        Initialize the provider with a base currency and seed rates.

        Args:
            base_currency: Currency all stored rates are quoted against
            seed_rates: Initial rates (defaults to DEFAULT_SEED_RATES)
            seed_base: Base the seed rates are quoted against

        Raises:
            UnsupportedCurrencyError: If base_currency differs from seed_base
                and has no seed rate
            InvalidRateError: If a seed rate is not strictly positive
        """
        self._base = normalize_code(base_currency)
        seed = DEFAULT_SEED_RATES if seed_rates is None else seed_rates
        for code, value in seed.items():
            if value <= 0:
                raise InvalidRateError(f"Seed rate for {code} must be positive, got {value}")
        self._rates: Dict[str, float] = _rebase(seed, normalize_code(seed_base), self._base)
        self._overrides: Dict[CurrencyPair, float] = {}
        self._lock = threading.RLock()
        logger.debug("Static rate table ready: base=%s, codes=%d", self._base, len(self._rates))

    @property
    def base_currency(self) -> str:
        return self._base

    def get_rate(self, source: str, target: str) -> float:
        """
        Resolve the rate for converting source into target.

        Resolution order: identity, exact-pair override, triangulation
        through the base currency.

        Args:
            source: Code converted from
            target: Code converted to

        Returns:
            Units of target per 1 unit of source

        Raises:
            UnsupportedCurrencyError: If no override covers the pair and
                either code is missing from the rate table
        """
        source = normalize_code(source)
        target = normalize_code(target)
        if source == target:
            return 1.0

        with self._lock:
            override = self._overrides.get(CurrencyPair(source, target))
            if override is not None:
                logger.debug("Using custom rate %s->%s = %s", source, target, override)
                return override

            unknown = [code for code in (source, target) if code not in self._rates]
            if unknown:
                raise UnsupportedCurrencyError(unknown)

            rate = self._rates[target] / self._rates[source]

        logger.debug("Triangulated %s->%s via %s = %s", source, target, self._base, rate)
        return rate

    def set_custom_rate(self, source: str, target: str, rate: float) -> None:
        """
        Set a directly quoted rate for one ordered pair.

        The codes do not need to be in the rate table. The reverse pair is
        not affected.

        Raises:
            InvalidRateError: If rate is not strictly positive; the existing
                override for the pair is kept
        """
        if rate <= 0:
            raise InvalidRateError(f"Rate must be positive, got {rate}")
        pair = CurrencyPair(normalize_code(source), normalize_code(target))
        with self._lock:
            self._overrides[pair] = float(rate)
        logger.info("Custom rate set: %s = %s", pair, rate)

    def register_currency(self, code: str, rate_vs_base: float) -> None:
        """
        Add or overwrite a currency in the rate table.

        Args:
            code: Currency code to register
            rate_vs_base: Units of code per 1 unit of the base currency

        Raises:
            InvalidRateError: If rate_vs_base is not strictly positive, or
                code is the base currency and rate_vs_base is not 1.0
        """
        code = normalize_code(code)
        if rate_vs_base <= 0:
            raise InvalidRateError(f"Rate for {code} must be positive, got {rate_vs_base}")
        if code == self._base and rate_vs_base != 1.0:
            raise InvalidRateError(f"Base currency {code} is fixed at 1.0")
        with self._lock:
            previous = self._rates.get(code)
            self._rates[code] = float(rate_vs_base)
        if previous is None:
            logger.info("Registered currency %s = %s per %s", code, rate_vs_base, self._base)
        else:
            logger.info("Updated currency %s: %s -> %s per %s", code, previous, rate_vs_base, self._base)

    def get_supported_codes(self) -> frozenset:
        """Return the codes currently in the rate table (unordered)."""
        with self._lock:
            return frozenset(self._rates)

    def rate_vs_base(self, code: str) -> Optional[float]:
        """Return the stored rate of code against the base, or None if unknown."""
        with self._lock:
            return self._rates.get(normalize_code(code))

    def has_custom_rate(self, source: str, target: str) -> bool:
        with self._lock:
            return CurrencyPair(normalize_code(source), normalize_code(target)) in self._overrides

    def custom_rates(self) -> Dict[CurrencyPair, float]:
        """Return a copy of the override table."""
        with self._lock:
            return dict(self._overrides)
