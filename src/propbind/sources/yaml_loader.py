"""YAML property source loader."""

from __future__ import annotations

from typing import Any, override

import yaml

from propbind.sources.loader import DocumentPropertySourceLoader


class YamlPropertySourceLoader(DocumentPropertySourceLoader):
    """Loads ``.yml`` and ``.yaml`` resources, one property source per document."""

    @override
    def supported_extensions(self) -> frozenset[str]:
        return frozenset({"yml", "yaml"})

    @override
    def parse_documents(self, text: str) -> list[Any]:
        # A trailing '---' produces no extra document in PyYAML
        return list(yaml.safe_load_all(text))
