"""Legacy integer message keys.

Older callers address strings by a dense integer, module_index * 1000 +
local_index. The generated table maps those back to the string keys the
translator understands.

Python 3.12+.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ftlchain.constants import INVALID_LEGACY_KEY, LEGACY_MODULE_STRIDE
from ftlchain.localization.types import MessageKey

__all__ = ["LegacyKeyTable"]


class LegacyKeyTable:
    """Read-only table of string keys grouped by module.

    Lookups never raise; anything out of range resolves to
    INVALID_LEGACY_KEY, which the translator then reports as a missing key.

    Example:
        >>> table = LegacyKeyTable([["valid-key", "two-args-key"], ["plural"]])
        >>> table.resolve_legacy(1000)
        'plural'
        >>> table.resolve(5, 0)
        'invalid-module-or-translation-index'
    """

    __slots__ = ("_keys",)

    def __init__(self, keys_by_module: Iterable[Iterable[MessageKey]] = ()) -> None:
        self._keys: tuple[tuple[MessageKey, ...], ...] = tuple(
            tuple(keys) for keys in keys_by_module
        )

    def __len__(self) -> int:
        return sum(len(keys) for keys in self._keys)

    @property
    def modules(self) -> Sequence[tuple[MessageKey, ...]]:
        return self._keys

    def resolve(self, module_index: int, local_index: int) -> MessageKey:
        """Return the key at (module_index, local_index) or the invalid-key sentinel."""
        if module_index < 0 or local_index < 0 or module_index >= len(self._keys):
            return INVALID_LEGACY_KEY
        keys = self._keys[module_index]
        if local_index >= len(keys):
            return INVALID_LEGACY_KEY
        return keys[local_index]

    def resolve_legacy(self, value: int) -> MessageKey:
        """Return the key for a combined legacy integer."""
        if value < 0:
            return INVALID_LEGACY_KEY
        module_index, local_index = divmod(value, LEGACY_MODULE_STRIDE)
        return self.resolve(module_index, local_index)
