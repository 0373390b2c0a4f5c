# persistent_homology/reduction/pairing.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

__all__ = [
    "PersistencePairing",
]


@dataclass
class PersistencePairing:
    """
    Index-level result of a reduction.

    pairs : dict
        destroyer index -> creator index (creator < destroyer).
    essential : list
        Creators without a destroyer (infinite persistence), sorted.
    size : int
        Number of simplices of the complex the indices refer to.
    """
    pairs: Dict[int, int] = field(default_factory=dict)
    essential: List[int] = field(default_factory=list)
    size: int = 0

    def creators(self) -> List[int]:
        return sorted(self.pairs.values())

    def destroyers(self) -> List[int]:
        return sorted(self.pairs.keys())

    def creator_of(self, destroyer: int) -> Optional[int]:
        return self.pairs.get(destroyer)

    def is_valid(self) -> bool:
        """creator < destroyer for every pair, and no index is used twice."""
        used = set()
        for d, c in self.pairs.items():
            if not (0 <= c < d):
                return False
            if c in used or d in used:
                return False
            used.update((c, d))
        return not any(e in used for e in self.essential)

    def __iter__(self) -> Iterator[Tuple[int, Optional[int]]]:
        """(creator, destroyer) sorted by creator, then (creator, None) for essentials."""
        for c, d in sorted((c, d) for d, c in self.pairs.items()):
            yield (c, d)
        for c in self.essential:
            yield (c, None)

    def __len__(self) -> int:
        return len(self.pairs) + len(self.essential)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        c, d = pair
        if d is None:
            return c in self.essential
        return self.pairs.get(d) == c

    def to_text(self) -> str:
        lines = [f"PersistencePairing(size={self.size}, pairs={len(self.pairs)}, essential={len(self.essential)})"]
        for c, d in self:
            lines.append(f"  {c} -> {'inf' if d is None else d}")
        return "\n".join(lines)
