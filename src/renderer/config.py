# renderer/config.py
import numpy as np

MAX_BOUNCES = 50
# Offsets secondary rays off the surface they leave to avoid self-hits.
T_MIN = 0.001
INFINITY = float(np.finfo(np.float32).max)

SHADING_MODES = ("material", "normal")
TONE_MAPPING_MODES = ("gamma", "reinhard")

QUALITY_LEVELS = {
    "preview": {"samples": 1, "bounces": 8},
    "balanced": {"samples": 16, "bounces": 16},
    "high_quality": {"samples": 64, "bounces": MAX_BOUNCES},
}

class RenderSettings:
    """
    Settings for one render: image size, sampling, shading and output mapping.
    """
    def __init__(self, width: int = 200, height: int = 100, samples: int = 1,
                 max_depth: int = MAX_BOUNCES, t_min: float = T_MIN, gamma: float = 2.0,
                 shading: str = "material", tone_mapping: str = "gamma", seed=None):
        self.width = width
        self.height = height
        self.samples = samples
        self.max_depth = max_depth
        self.t_min = t_min
        self.gamma = gamma
        self.shading = shading
        self.tone_mapping = tone_mapping
        self.seed = seed
        self.validate()

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        """Builds settings from a named quality level; None overrides are ignored."""
        if quality not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {quality!r}, expected one of {sorted(QUALITY_LEVELS)}")
        level = QUALITY_LEVELS[quality]
        kwargs = {"samples": level["samples"], "max_depth": level["bounces"]}
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples <= 0:
            raise ValueError(f"Samples per pixel must be positive, got {self.samples}")
        if self.max_depth < 0:
            raise ValueError(f"Max depth must not be negative, got {self.max_depth}")
        if self.gamma <= 0:
            raise ValueError(f"Gamma must be positive, got {self.gamma}")
        if self.shading not in SHADING_MODES:
            raise ValueError(f"Unknown shading mode {self.shading!r}, expected one of {SHADING_MODES}")
        if self.tone_mapping not in TONE_MAPPING_MODES:
            raise ValueError(f"Unknown tone mapping {self.tone_mapping!r}, expected one of {TONE_MAPPING_MODES}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
