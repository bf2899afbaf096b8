# supervision_engine/config.py

"""
Configuration module for the supervision engine.
Holds the fill-rate thresholds used to classify slots.
"""

from dataclasses import dataclass, field
import logging


@dataclass
class CapacityConfig:
    """Thresholds (in percent) separating the fill-rate tiers"""

    critical_threshold: float = 50.0  # below this a slot is critical
    ok_threshold: float = 100.0  # at or above this a slot is covered

    def __post_init__(self):
        if self.critical_threshold > self.ok_threshold:
            raise ValueError(
                f"critical_threshold ({self.critical_threshold}) must not exceed "
                f"ok_threshold ({self.ok_threshold})"
            )


@dataclass
class SupervisionEngineConfig:
    """Main configuration for the supervision engine"""

    capacity: CapacityConfig = field(default_factory=CapacityConfig)

    enable_logging: bool = True


# Global configuration instance
config = SupervisionEngineConfig()


def get_logger(name: str) -> logging.Logger:
    """Get a child of the "supervision_engine" logger.

    No handler or level is attached here: records propagate to whatever the
    host application configured.
    """
    logger = logging.getLogger(f"supervision_engine.{name}")
    logger.disabled = not config.enable_logging
    return logger
