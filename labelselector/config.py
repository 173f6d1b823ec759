"""Configuration classes for labelselector components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfig:
    """Configuration for selector identity derivation."""

    # Namespace tag prepended to selector identifiers. Distinguishes selector
    # IDs from other identifier kinds sharing the same hash space.
    id_namespace: str = "s"

    def __post_init__(self) -> None:
        if not self.id_namespace:
            raise ValueError("id_namespace must be a non-empty string")


# Global configuration instance
SELECTOR_CONFIG = SelectorConfig()
