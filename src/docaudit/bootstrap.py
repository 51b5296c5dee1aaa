"""Composition root: dependency Injection Container.

This module is the only place where concrete infrastructure classes are
imported and wired together. The CLI talks to use cases only.
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Optional

from docaudit.application.use_cases.check_links import CheckLinksUseCase
from docaudit.application.use_cases.validate_documents import ValidateDocumentsUseCase
from docaudit.config.loader import load_config
from docaudit.config.models import HouseStyleConfig
from docaudit.links.prober import HttpLinkProber
from docaudit.rules.registry import default_rules


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        uc = container.validate_documents()
        uc.execute([Path("proc_install.adoc")], report)
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._config_path = Path(config_path) if config_path else None

    @cached_property
    def config(self) -> HouseStyleConfig:
        """Configuration, loaded on first use.

        Raises:
            ConfigurationError: The configuration file is missing or invalid.
        """
        return load_config(self._config_path)

    def validate_documents(self) -> ValidateDocumentsUseCase:
        settings = self.config.validator
        return ValidateDocumentsUseCase(lambda: default_rules(settings))

    def check_links(self, *, pool_size: int = 10) -> CheckLinksUseCase:
        settings = self.config.links
        prober = HttpLinkProber(settings, pool_size=max(1, pool_size))
        return CheckLinksUseCase(prober, settings)
