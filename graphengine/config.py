"""Configuration defaults for graphengine algorithms."""

from dataclasses import dataclass
from typing import Optional, Union

from graphengine.types.base import DfsStrategy, Weight


@dataclass
class EngineConfig:
    """Defaults applied when an algorithm argument is left as ``None``."""

    # Frame-keeping strategy for every DFS-based routine
    dfs_strategy: DfsStrategy = DfsStrategy.ITERATIVE

    # Scan edges for negative weights before running Dijkstra
    validate_dijkstra_weights: bool = True

    # Weight assigned to edges added without an explicit weight
    default_weight: Weight = 1

    def resolve_strategy(
        self, value: Optional[Union[DfsStrategy, str]] = None
    ) -> DfsStrategy:
        """Return ``value`` as a DfsStrategy, or the configured default if None."""
        if value is None:
            return self.dfs_strategy
        if isinstance(value, DfsStrategy):
            return value
        if isinstance(value, str):
            return DfsStrategy.from_string(value)
        raise ValueError(f"Invalid dfs strategy {value!r}.")

    def resolve_validate_weights(self, value: Optional[bool] = None) -> bool:
        """Return ``value`` or the configured Dijkstra validation default."""
        if value is None:
            return self.validate_dijkstra_weights
        return bool(value)


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
