"""Render settings, with overrides from PATHTRACER_* environment variables."""
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "PATHTRACER_"


@dataclass(frozen=True)
class RenderSettings:
    """
    Attributes:
        width: Image width in pixels.
        aspect_ratio: width / height.
        samples_per_pixel: Number of independent sample passes averaged per pixel.
        max_depth: Maximum number of bounces per path.
        workers: Number of worker processes; 1 renders in-process.
        seed: Base seed for the per-pass random streams (None for entropy).
        log_level: Logging level name used by the command line.
    """
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 36
    max_depth: int = 50
    workers: int = 1
    seed: Optional[int] = None
    log_level: str = "INFO"

    @property
    def height(self) -> int:
        return max(1, int(self.width / self.aspect_ratio))

    def validate(self) -> "RenderSettings":
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        return self

    def with_overrides(self, **overrides) -> "RenderSettings":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 prefix: str = ENV_PREFIX, **overrides) -> "RenderSettings":
        """
        Builds settings from PATHTRACER_WIDTH, PATHTRACER_SAMPLES,
        PATHTRACER_MAX_DEPTH, PATHTRACER_WORKERS, PATHTRACER_SEED and
        PATHTRACER_LOG_LEVEL; keyword overrides that are not None win.

        Raises:
            ValueError: If a variable is not a valid integer.
        """
        environ = os.environ if environ is None else environ

        def env_int(name: str, default):
            raw = environ.get(prefix + name)
            if raw is None or raw == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{prefix + name} must be an integer, got {raw!r}") from None

        defaults = cls()
        settings = cls(
            width=env_int("WIDTH", defaults.width),
            samples_per_pixel=env_int("SAMPLES", defaults.samples_per_pixel),
            max_depth=env_int("MAX_DEPTH", defaults.max_depth),
            workers=env_int("WORKERS", defaults.workers),
            seed=env_int("SEED", defaults.seed),
            log_level=environ.get(prefix + "LOG_LEVEL", defaults.log_level),
        )
        return settings.with_overrides(**overrides)
