"""Payload handed to a secondary Fluent runtime (e.g. a web front end).

The secondary runtime parses the same resources itself and builds its own
equivalent chain, so only the ordered languages and raw texts are exported.

Python 3.12+.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

__all__ = ["ExportedResources"]


@dataclass(frozen=True, slots=True)
class ExportedResources:
    """Ordered languages and raw resource texts of a chain.

    ``languages[i]`` is the locale whose bundle was built from
    ``resources[i]``; the reference language is always last.

    Attributes:
        languages: Locale display strings in chain order
        resources: Raw catalog text per chain entry (override text excluded)
    """

    languages: tuple[str, ...]
    resources: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.languages) != len(self.resources):
            msg = (
                f"languages and resources must align: "
                f"{len(self.languages)} != {len(self.resources)}"
            )
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serializable mapping using the secondary runtime's field names."""
        return {"langs": list(self.languages), "resources": list(self.resources)}

    def to_json(self) -> str:
        """JSON text of to_dict(), keeping non-ASCII text readable."""
        return json.dumps(self.to_dict(), ensure_ascii=False)
