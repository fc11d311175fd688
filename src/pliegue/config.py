"""ContextVar-based render configuration for Pliegue.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Printer instance, read by every render in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In Printer class
    printer = Printer(width=60)
    out = printer(doc)  # Sets config internally via ContextVar

    # Direct usage
    from pliegue.config import set_render_config, reset_render_config, RenderConfig

    set_render_config(RenderConfig(width=100))
    try:
        out = render(doc)
    finally:
        reset_render_config()

    # Or use the context manager
    with render_config_context(RenderConfig(width=100)):
        out = render(doc)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from pliegue.errors import ConfigError

DEFAULT_WIDTH = 80
DEFAULT_INDENT = 2


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        width: Target line width used when render() is called without one
        indent: Nest amount used by document builders that indent blocks

    """

    width: int = DEFAULT_WIDTH
    indent: int = DEFAULT_INDENT

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ConfigError("width", f"must be >= 0, got {self.width}")
        if self.indent < 0:
            raise ConfigError("indent", f"must be >= 0, got {self.indent}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Raises:
            ConfigError: If a value is out of range.

        Example:
            >>> RenderConfig.from_dict({"width": 40, "unknown_key": 1}).width
            40

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(width=20)):
        ...     get_render_config().width
        20

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_WIDTH",
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
]
