"""Claude subscription usage for status lines and prompts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("claude-usage-line")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
