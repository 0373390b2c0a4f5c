# persistent_homology/config.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

__all__ = [
    "PersistenceConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
]


@dataclass(frozen=True)
class PersistenceConfig:
    """
    Settings shared by the persistence entry points.

    Vary a setting with ``dataclasses.replace(DEFAULT_CONFIG, algorithm="standard")``.

    Notes
    -----
    - ``algorithm`` and ``representation`` change running time only; the
      resulting diagrams are the same.
    - ``dualize`` reduces the coboundary matrix of the reversed filtration and
      translates the pairs back. It cannot be combined with a restricted
      (intersection homology) reduction, which always runs on the primal matrix.
    - ``include_all_unpaired_creators=False`` drops essential classes in the
      top dimension of the complex (e.g. the unfilled triangles of a truncated
      Rips complex, which could never be destroyed).
    - ``check_order`` verifies, while building the boundary matrix, that every
      face precedes its coface.
    """
    algorithm: Literal["standard", "twist"] = "twist"
    representation: Literal["set", "vector"] = "set"
    dualize: bool = True
    include_all_unpaired_creators: bool = True
    check_order: bool = True

    def validate(self) -> "PersistenceConfig":
        if self.algorithm not in ("standard", "twist"):
            raise ValueError(f"Unknown algorithm {self.algorithm!r}. Expected 'standard' or 'twist'.")
        if self.representation not in ("set", "vector"):
            raise ValueError(f"Unknown representation {self.representation!r}. Expected 'set' or 'vector'.")
        return self


DEFAULT_CONFIG = PersistenceConfig()


def resolve_config(config: Optional[PersistenceConfig]) -> PersistenceConfig:
    return (DEFAULT_CONFIG if config is None else config).validate()
