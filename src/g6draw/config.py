"""Configuration management for g6draw using Pydantic models."""

import json
import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CONFIG_FILE_NAME = ".g6draw.json"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_NAMED_COLOR = re.compile(r"^[a-zA-Z]+$")


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class GridKind(str, Enum):
    """Grids a finished layout can be snapped to."""
    NONE = "none"
    SQUARE = "square"
    CIRCULAR = "circular"


def _validate_color(v):
    if v is None:
        return v
    if not isinstance(v, str) or not (_HEX_COLOR.match(v) or _NAMED_COLOR.match(v)):
        raise ValueError(f"color must be #rgb, #rrggbb or a color keyword, got: {v!r}")
    return v


class StyleConfig(BaseModel):
    """Drawing style section. Read-only once constructed."""
    margin: float = 40.0
    vertex_radius: float = Field(alias="vertexRadius", default=12.0)
    vertex_border_width: float = Field(alias="vertexBorderWidth", default=3.0)
    edge_stroke_width: float = Field(alias="edgeStrokeWidth", default=3.0)
    highlight_stroke_boost: float = Field(alias="highlightStrokeBoost", default=2.0)
    vertex_color: str = Field(alias="vertexColor", default="#87CEEB")
    vertex_border_color: str = Field(alias="vertexBorderColor", default="#00008B")
    edge_color: str = Field(alias="edgeColor", default="#000000")
    highlight_color: str = Field(alias="highlightColor", default="#32CD32")
    label_color: str = Field(alias="labelColor", default="#000000")
    background_color: str | None = Field(alias="backgroundColor", default=None)
    font_size: float = Field(alias="fontSize", default=12.0)
    vertex_labels: bool = Field(alias="vertexLabels", default=True)
    edge_labels: bool = Field(alias="edgeLabels", default=False)
    zero_indexed: bool = Field(alias="zeroIndexed", default=False)

    @field_validator("margin", "vertex_radius", "edge_stroke_width", "font_size")
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError(f"must be > 0, got: {v}")
        return v

    @field_validator("vertex_border_width", "highlight_stroke_boost")
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError(f"must be >= 0, got: {v}")
        return v

    @field_validator(
        "vertex_color",
        "vertex_border_color",
        "edge_color",
        "highlight_color",
        "label_color",
        "background_color",
    )
    @classmethod
    def validate_color(cls, v):
        return _validate_color(v)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class LayoutConfig(BaseModel):
    """Force-directed layout section."""
    iterations: int = 300
    seed: int | None = None
    ideal_edge_length: float = Field(alias="idealEdgeLength", default=1.0)
    repulsion: float = 1.0
    spring: float = 1.0
    gravity: float = 0.05
    initial_temperature: float = Field(alias="initialTemperature", default=0.5)
    jitter: float = 0.05
    width: float = 800.0
    height: float = 800.0
    padding: float = 0.0
    # Each layout iteration costs O(n^2); 500 vertices take seconds, thousands take minutes
    max_vertices: int | None = Field(alias="maxVertices", default=500)
    grid: GridKind = GridKind.NONE
    grid_size: float = Field(alias="gridSize", default=1.0)  # in ideal edge lengths

    @field_validator("iterations")
    @classmethod
    def validate_iterations(cls, v):
        if v < 1:
            raise ValueError("iterations must be >= 1")
        return v

    @field_validator(
        "ideal_edge_length", "repulsion", "spring", "initial_temperature", "width", "height", "grid_size"
    )
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError(f"must be > 0, got: {v}")
        return v

    @field_validator("gravity", "jitter", "padding")
    @classmethod
    def validate_non_negative(cls, v):
        if v < 0:
            raise ValueError(f"must be >= 0, got: {v}")
        return v

    @field_validator("max_vertices")
    @classmethod
    def validate_max_vertices(cls, v):
        if v is not None and v < 1:
            raise ValueError("max_vertices must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_padding_fits(self):
        if 2 * self.padding >= min(self.width, self.height):
            raise ValueError("padding must leave room for the drawing area")
        return self

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class G6DrawConfig(BaseModel):
    """Complete g6draw configuration model."""
    style: StyleConfig = Field(default_factory=StyleConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> G6DrawConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .g6draw.json

    Returns:
        G6DrawConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If an explicitly named config file does not exist
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e
        try:
            return G6DrawConfig(**config_data)
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}") from e
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .g6draw.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> G6DrawConfig:
    """Create default configuration."""
    return G6DrawConfig()
