from __future__ import annotations

"""
Internationalization (i18n) Utility.

Provides a module-level manager for user-facing strings. Messages live in
nested JSON locale files and are addressed with dot-notation keys; named
placeholders are interpolated with str.format.
"""

import json
import logging
import os
from typing import Any, Dict

from gitcat.domain.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

LOCALES_REL_PATH = os.path.join("..", "interface", "locales")

# -----------------------------------------------------------------------------
# I18N MANAGER SERVICE
# -----------------------------------------------------------------------------

class I18n:
    """
    Resource manager for locale-specific string translations.

    Unknown locales fall back to the default locale; unknown keys resolve to
    the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self._locale = locale
        self._translations: Dict[str, Any] = {}
        self.is_loaded = False

        base_dir = os.path.dirname(os.path.abspath(__file__))
        self._locales_path = os.path.abspath(os.path.join(base_dir, LOCALES_REL_PATH))

        self.load_locale(locale)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def locales_path(self) -> str:
        return self._locales_path

    def load_locale(self, locale: str) -> None:
        """
        Load a translation dictionary from the locale directory.

        Args:
            locale: ISO identifier for the target language.
        """
        file_path = os.path.join(self._locales_path, f"{locale}.json")

        if not os.path.exists(file_path):
            if locale != DEFAULT_LOCALE:
                logger.warning(f"I18n: Locale '{locale}' not available. Falling back to '{DEFAULT_LOCALE}'.")
                self.load_locale(DEFAULT_LOCALE)
                return
            logger.warning(f"I18n: Locale resource missing at '{file_path}'.")
            self._translations = {}
            self.is_loaded = False
            return

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                self._translations = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"I18n: Corruption in locale file {file_path}: {e}")
            self._translations = {}
            self.is_loaded = False
            return

        self._locale = locale
        self.is_loaded = True
        logger.debug(f"I18n: Loaded locale dictionary: {locale}")

    def t(self, key: str, **kwargs: Any) -> str:
        """
        Resolve and format a message using dot-notation.

        Args:
            key: Hierarchical identifier path (e.g., 'report.summary.tracked').
            **kwargs: Named placeholder values.

        Returns:
            str: The formatted message, or the key itself when unresolved.
        """
        current_val: Any = self._translations
        for k in key.split("."):
            if not isinstance(current_val, dict):
                return key
            current_val = current_val.get(k)

        if not isinstance(current_val, str):
            return key

        try:
            return current_val.format(**kwargs) if kwargs else current_val
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"I18n: Formatting error for '{key}': {e}")
            return current_val

# -----------------------------------------------------------------------------
# SERVICE INITIALIZATION
# -----------------------------------------------------------------------------

# Global singleton instance for application-wide resource access
i18n = I18n(DEFAULT_LOCALE)
