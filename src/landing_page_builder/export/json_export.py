"""JSON export of an assembled website."""

from __future__ import annotations

import json

from ..models.website import Website


def export_json(website: Website) -> str:
    """Serialize the website document consumed by rendering clients.

    Keys are camelCase and sections are ordered by ``order``.
    """
    data = website.model_dump(by_alias=True, mode="json")
    data["sections"] = sorted(data["sections"], key=lambda section: section["order"])
    return json.dumps(data, indent=2, ensure_ascii=False)


__all__ = ["export_json"]
