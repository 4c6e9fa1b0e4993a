"""Locale merger - per-application component translations with a shared base."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..constants import DEFAULT_I18N_LOCATION, SECRETPAD
from ..errors import LocaleLoadError
from ..policy import VisibilityPolicy


logger = logging.getLogger(__name__)

LocaleBundle = dict[str, dict[str, Any]]


class LocaleMerger:
    """
    Builds the locale bundle from one translation file per application.

    Each file name (minus extension) is an application id. The file named
    after the base application (``secretpad``) is merged into every other
    application and never returned on its own. Base values overwrite an
    application's own value for the same key.

    Reads the file system on every call; run it off the event loop.
    """

    def __init__(
        self,
        location: str | Path = DEFAULT_I18N_LOCATION,
        policy: VisibilityPolicy | None = None,
        base_app: str = SECRETPAD,
    ):
        self.location = Path(location)
        self.base_app = base_app
        self._policy = policy or VisibilityPolicy()

    def list_component_i18n(self) -> LocaleBundle:
        """
        Merge and filter all translation files.

        Raises:
            LocaleLoadError: if the directory is missing or unreadable, or
                if any file fails to parse.
        """
        apps, base = self._read_directory()

        for app, translations in apps.items():
            translations.update(copy.deepcopy(base))

        for app, translations in apps.items():
            for key in list(translations):
                if self._policy.is_locale_hidden(app, key):
                    logger.info("hide %s/%s", app, key)
                    del translations[key]

        return apps

    def _read_directory(self) -> tuple[LocaleBundle, dict[str, Any]]:
        if not self.location.is_dir():
            raise LocaleLoadError(self.location, "directory does not exist")

        try:
            files = sorted(p for p in self.location.iterdir() if p.is_file())
        except OSError as e:
            raise LocaleLoadError(self.location, str(e)) from e

        apps: LocaleBundle = {}
        base: dict[str, Any] = {}
        for file_path in files:
            content = self._read_file(file_path)
            if not content:
                logger.warning("Skipping empty i18n file: %s", file_path)
                continue

            app = file_path.stem
            if app == self.base_app:
                base = content
            else:
                apps[app] = content
            logger.debug("Loaded %d i18n keys for %s", len(content), app)

        return apps, base

    def _read_file(self, path: Path) -> dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in (".yaml", ".yml"):
                    content = yaml.safe_load(f)
                else:
                    text = f.read()
                    content = json.loads(text) if text.strip() else None
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            raise LocaleLoadError(path, str(e)) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise LocaleLoadError(path, "top-level value must be an object")
        return content
