from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CLASSIFIER_URL = (
    "https://raw.github.com/opencv/opencv/master/data/haarcascades/"
    "haarcascade_frontalface_alt.xml"
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class CameraConfig(BaseModel):
    """Frame source settings."""
    source: int | str = 0  # camera index, or a video file path / stream URL
    width: int | None = None  # None = device default
    height: int | None = None
    gamma: float = Field(default=2.2, gt=0)  # camera response gamma


class ClassifierConfig(BaseModel):
    url: str = DEFAULT_CLASSIFIER_URL
    cache_dir: str = "~/.cache/cvdemo"
    timeout: float = Field(default=60.0, gt=0)

    # detectMultiScale parameters
    scale_factor: float = 1.1
    min_neighbors: int = Field(default=3, ge=0)
    min_size: tuple[int, int] = (0, 0)

    @field_validator("scale_factor")
    @classmethod
    def _scale_above_one(cls, v: float) -> float:
        if v <= 1.0:
            raise ValueError("scale_factor must be greater than 1")
        return v


class ContourConfig(BaseModel):
    threshold: float = Field(default=64.0, ge=0, le=255)
    max_value: float = Field(default=255.0, ge=0, le=255)
    epsilon_ratio: float = Field(default=0.02, gt=0)  # of the contour perimeter


class WarpConfig(BaseModel):
    spread: float = Field(default=0.25, ge=0)  # width of the random axis-angle box
    seed: int | None = None


class RecorderConfig(BaseModel):
    path: str = "output.avi"
    fps: float = Field(default=30.0, gt=0)
    fourcc: str = "MJPG"

    @field_validator("fourcc")
    @classmethod
    def _four_chars(cls, v: str) -> str:
        if len(v) != 4:
            raise ValueError(f"fourcc must be exactly 4 characters, got {v!r}")
        return v


class DisplayConfig(BaseModel):
    title: str = "Some Title"
    enabled: bool = True
    gamma: float = Field(default=2.2, gt=0)  # monitor gamma


class RunConfig(BaseModel):
    max_frames: int | None = Field(default=None, ge=1)


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: str | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"level must be one of {LOG_LEVELS}, got {v!r}")
        return v.upper()


class Config(BaseModel):
    camera: CameraConfig = CameraConfig()
    classifier: ClassifierConfig = ClassifierConfig()
    contours: ContourConfig = ContourConfig()
    warp: WarpConfig = WarpConfig()
    recorder: RecorderConfig = RecorderConfig()
    display: DisplayConfig = DisplayConfig()
    run: RunConfig = RunConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(config_path: str | Path | None = None) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file. ``None`` gives
            the built-in defaults.

    Returns:
        Validated Config object.
    """
    if config_path is None:
        return Config()

    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f) or {}

    return Config(**raw_config)


def save_config(config: Config, output_path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration object to save.
        output_path: Path to save the YAML file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
