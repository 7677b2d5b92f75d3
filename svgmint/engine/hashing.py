"""Per-run namespacing hash allocator."""

from __future__ import annotations

import random
import string

_LETTERS = string.ascii_lowercase
_ALPHABET = string.ascii_lowercase + string.digits


class HashAllocator:
    """Hands out short ids that never repeat within one run.

    The first character is always a letter so a hash is a valid CSS class name
    and XML id prefix on its own. Pass ``seed`` for reproducible output.
    """

    def __init__(self, length: int = 6, seed: int | str | None = None) -> None:
        if length < 2:
            raise ValueError("Hash length must be at least 2")
        self.length = length
        self._random = random.Random(seed)
        self._used: set[str] = set()

    def allocate(self) -> str:
        capacity = len(_LETTERS) * len(_ALPHABET) ** (self.length - 1)
        if len(self._used) >= capacity:
            raise RuntimeError(f"Hash space exhausted ({capacity} ids of length {self.length})")
        while True:
            candidate = self._random.choice(_LETTERS) + "".join(
                self._random.choices(_ALPHABET, k=self.length - 1)
            )
            if candidate not in self._used:
                self._used.add(candidate)
                return candidate

    def __contains__(self, value: str) -> bool:
        return value in self._used

    def __len__(self) -> int:
        return len(self._used)
