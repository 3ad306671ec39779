"""
Centralized constants for the tip calculator.

Locale, currency and input limits live here so the engine, the
formatting helpers and the page share one source of truth.
"""
from __future__ import annotations

# =============================================================================
# LOCALE AND CURRENCY
# =============================================================================

# Locale used when the requested one cannot be resolved
FALLBACK_LOCALE: str = "en_US"

# Environment variable holding the locale the screen starts with
DEFAULT_LOCALE_ENV: str = "TIP_DEFAULT_LOCALE"

# Currency used when a locale has no territory (e.g. "en", "fr")
DEFAULT_CURRENCY: str = "USD"

# Locales offered in the selector: [code, label]
SUPPORTED_LOCALES: list[list[str]] = [
    ["en_US", "English (United States)"],
    ["en_GB", "English (United Kingdom)"],
    ["en_IN", "English (India)"],
    ["de_DE", "Deutsch (Deutschland)"],
    ["fr_FR", "Français (France)"],
    ["es_ES", "Español (España)"],
    ["es_PE", "Español (Perú)"],
    ["pt_BR", "Português (Brasil)"],
    ["ja_JP", "日本語 (日本)"],
]


# =============================================================================
# TIP CALCULATION
# =============================================================================

# Tip percent is expressed in percentage points
PERCENT_DIVISOR: int = 100


# =============================================================================
# TEXT INPUT
# =============================================================================

# Maximum length accepted for the numeric text fields
INPUT_MAX_LENGTH: int = 32
