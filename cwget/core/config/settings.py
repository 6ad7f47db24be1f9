"""
User settings — base-directory override and active shell dialect.

Resolved once per invocation, in precedence order:
    explicit value (CLI flag)  >  CWGET_* env var  >  catalog default
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict

from cwget.core.models.library import DEFAULT_BASE_DIR, CatalogSettings
from cwget.core.services.synthesis.paths import normalize_base_dir
from cwget.core.services.synthesis.quoting import Dialect

logger = logging.getLogger(__name__)

ENV_BASE_DIR = "CWGET_BASE_DIR"
ENV_PLATFORM = "CWGET_PLATFORM"


class UserSettings(BaseModel):
    """Settings the user can change; never owned by the catalog."""

    model_config = ConfigDict(frozen=True)

    base_dir: str = DEFAULT_BASE_DIR
    platform: Dialect = Dialect.POSIX


def parse_platform(value: str | None) -> Dialect:
    """Anything other than ``powershell`` means POSIX."""
    if (value or "").strip().lower() == Dialect.POWERSHELL:
        return Dialect.POWERSHELL
    return Dialect.POSIX


def resolve_settings(
    catalog_settings: CatalogSettings,
    base_dir: str | None = None,
    platform: str | None = None,
) -> UserSettings:
    """Merge explicit values, environment, and catalog defaults."""
    default_base = normalize_base_dir(catalog_settings.base_dir_default, DEFAULT_BASE_DIR)
    raw_base = base_dir if base_dir is not None else os.environ.get(ENV_BASE_DIR)
    raw_platform = platform if platform is not None else os.environ.get(ENV_PLATFORM)

    settings = UserSettings(
        base_dir=normalize_base_dir(raw_base, default_base),
        platform=parse_platform(raw_platform),
    )
    logger.debug("Settings: base_dir=%s platform=%s", settings.base_dir, settings.platform)
    return settings


def is_base_dir_overridden(settings: UserSettings, catalog_settings: CatalogSettings) -> bool:
    """True when the active base dir differs from the catalog default."""
    default_base = normalize_base_dir(catalog_settings.base_dir_default, DEFAULT_BASE_DIR)
    return settings.base_dir != default_base
