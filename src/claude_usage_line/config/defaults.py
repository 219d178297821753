"""Default configuration for Claude usage line."""

from .schema import UsageLineConfig


def get_default_config() -> UsageLineConfig:
    """Generate the default usage line configuration."""
    return UsageLineConfig()
