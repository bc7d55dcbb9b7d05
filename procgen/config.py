"""Generator configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from procgen.core.models import GenContext


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable configuration for a generation session."""

    # Seeds
    global_seed: int = 42
    progression_layer_id: str = "v0"

    # Cache / queries
    max_cached_sectors: int = 128
    max_query_radius: int = 2           # Largest cube radius the API will expand

    # Cosmetic randomness (never used for content)
    cosmetic_seed: int = 12345

    # Missions
    default_mission_tier: int = 0

    # Logging
    log_level: str = "INFO"

    def context(self) -> GenContext:
        return GenContext(
            global_seed=self.global_seed,
            progression_layer_id=self.progression_layer_id,
        )
