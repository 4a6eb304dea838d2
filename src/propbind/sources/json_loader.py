"""JSON property source loader."""

from __future__ import annotations

import json
from typing import Any, override

from propbind.sources.loader import DocumentPropertySourceLoader


class JsonPropertySourceLoader(DocumentPropertySourceLoader):
    """Loads ``.json`` resources into a single property source."""

    @override
    def supported_extensions(self) -> frozenset[str]:
        return frozenset({"json"})

    @override
    def parse_documents(self, text: str) -> list[Any]:
        if not text.strip():
            return []
        return [json.loads(text)]
