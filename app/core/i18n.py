"""
Translation bootstrap.

Registers the static locale bundles once and resolves keys synchronously,
falling back to the default locale and then to the key itself.
"""
import json
import logging
import re
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from app.core import config

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("en", "dr", "ps")
LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"

_INTERPOLATION = re.compile(r"\{\{\s*(\w+)\s*\}\}")

Resources = Dict[str, Dict[str, Any]]


def load_locale_bundles(directory: Path = LOCALES_DIR) -> Resources:
    """Read ``<code>.json`` for every supported language."""
    resources: Resources = {}
    for code in SUPPORTED_LANGUAGES:
        path = Path(directory) / f"{code}.json"
        with path.open(encoding="utf-8") as fh:
            resources[code] = json.load(fh)
    return resources


class I18n:
    """Holds registered bundles and the active language."""

    def __init__(self):
        self.is_initialized = False
        self.resources: Resources = {}
        self.language: Optional[str] = None
        self.fallback_language: Optional[str] = None

    def init(self, resources: Resources, lng: str, fallback_lng: str) -> "I18n":
        if self.is_initialized:
            logger.debug("i18n already initialized, skipping")
            return self
        self.resources = dict(resources)
        self.language = lng
        self.fallback_language = fallback_lng
        self.is_initialized = True
        logger.info(f"i18n initialized with languages: {', '.join(sorted(self.resources))}")
        return self

    def change_language(self, lng: str) -> None:
        if lng not in self.resources:
            raise ValueError(f"Unsupported language: {lng}")
        self.language = lng

    def _lookup(self, lng: Optional[str], key: str) -> Optional[str]:
        node: Any = self.resources.get(lng) if lng else None
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def t(self, key: str, lng: Optional[str] = None, **values: Any) -> str:
        """Translate ``key``; returns the key itself when no bundle has it."""
        text = self._lookup(lng or self.language, key)
        if text is None:
            text = self._lookup(self.fallback_language, key)
        if text is None:
            return key
        # No escaping: rendering layers escape on their own
        return _INTERPOLATION.sub(lambda m: str(values.get(m.group(1), m.group(0))), text)


i18n = I18n()


def init_i18n(
    instance: I18n = i18n,
    loader: Callable[[], Resources] = load_locale_bundles,
    default_language: str = config.DEFAULT_LANGUAGE,
) -> I18n:
    """Initialize ``instance`` once. Later calls return it untouched without loading bundles."""
    if instance.is_initialized:
        return instance
    return instance.init(loader(), lng=default_language, fallback_lng=default_language)
