"""AnalysisSettings — validated run configuration with YAML round-trip.

YAML support requires pyyaml. Raises ImportError with clear install
instructions if pyyaml is not available.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from colocount.core.exceptions import InvalidArgumentError
from colocount.core.models import AnalysisMetadata, is_empty_channel_label

SUPPORTED_METHODS = frozenset({"otsu", "li", "triangle", "mean", "manual"})

DEFAULT_MEDIAN_SIZE = 3


def _require_yaml() -> Any:
    """Import and return the yaml module, or raise a helpful error."""
    try:
        import yaml

        return yaml
    except ImportError:
        raise ImportError(
            "pyyaml is required for settings serialization. "
            "Install it with: pip install pyyaml"
        ) from None


def _coerce_filter_flag(value: Any) -> bool:
    """Accept True/False or the integers 0/1."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InvalidArgumentError("filter", "choose either 0 or 1")


@dataclass(frozen=True)
class AnalysisSettings:
    """Parameters of one colocalisation run.

    Attributes:
        channel_names: Fluorophore labels for channels 1, 2, 3. A third
            label of ``"none"`` (or empty) marks a two-channel image.
        median_filter: Apply a median filter to every channel before
            binarisation.
        median_size: Side length of the square median neighbourhood.
        threshold_method: Global threshold method ("otsu" by default).
        manual_threshold: Threshold value when method is "manual".
    """

    channel_names: tuple[str, str, str]
    median_filter: bool = False
    median_size: int = DEFAULT_MEDIAN_SIZE
    threshold_method: str = "otsu"
    manual_threshold: float | None = None

    def __post_init__(self) -> None:
        """Validate every field before any computation runs."""
        names = tuple(self.channel_names)
        if len(names) != 3:
            raise InvalidArgumentError(
                "channel_names", f"expected 3 labels, got {len(names)}"
            )
        for i, name in enumerate(names, start=1):
            if not isinstance(name, str):
                raise InvalidArgumentError(f"ch{i}", "channel label must be text")
        object.__setattr__(self, "channel_names", names)
        object.__setattr__(self, "median_filter", _coerce_filter_flag(self.median_filter))

        if (
            isinstance(self.median_size, bool)
            or not isinstance(self.median_size, int)
            or self.median_size < 1
            or self.median_size % 2 == 0
        ):
            raise InvalidArgumentError(
                "median_size", f"must be a positive odd integer, got {self.median_size!r}"
            )
        if self.threshold_method not in SUPPORTED_METHODS:
            raise InvalidArgumentError(
                "threshold_method",
                f"unknown method {self.threshold_method!r}. "
                f"Supported: {sorted(SUPPORTED_METHODS)}",
            )
        if self.threshold_method == "manual" and self.manual_threshold is None:
            raise InvalidArgumentError(
                "manual_threshold", "required when threshold_method='manual'"
            )

    @property
    def has_channel3(self) -> bool:
        return not is_empty_channel_label(self.channel_names[2])

    def metadata(self) -> AnalysisMetadata:
        """Descriptive metadata for results produced with these settings."""
        return AnalysisMetadata(
            channel_names=self.channel_names,
            median_filtered=self.median_filter,
            has_channel3=self.has_channel3,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "channels": {
                "ch1": self.channel_names[0],
                "ch2": self.channel_names[1],
                "ch3": self.channel_names[2],
            },
            "median_filter": self.median_filter,
            "median_size": self.median_size,
            "threshold_method": self.threshold_method,
        }
        if self.manual_threshold is not None:
            data["manual_threshold"] = float(self.manual_threshold)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisSettings:
        """Build settings from a mapping as written by ``to_dict``.

        Raises:
            InvalidArgumentError: If required keys are missing or invalid.
        """
        channels = data.get("channels")
        if not isinstance(channels, dict):
            raise InvalidArgumentError("channels", "expected a mapping with ch1, ch2, ch3")
        for key in ("ch1", "ch2"):
            if key not in channels:
                raise InvalidArgumentError(key, "missing channel label")
        return cls(
            channel_names=(channels["ch1"], channels["ch2"], channels.get("ch3", "none")),
            median_filter=data.get("median_filter", False),
            median_size=data.get("median_size", DEFAULT_MEDIAN_SIZE),
            threshold_method=data.get("threshold_method", "otsu"),
            manual_threshold=data.get("manual_threshold"),
        )

    def to_yaml(self, path: Path) -> None:
        """Serialize these settings to a YAML file."""
        yaml = _require_yaml()
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, path: Path) -> AnalysisSettings:
        """Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the YAML file doesn't exist.
            InvalidArgumentError: If the YAML is not a valid settings mapping.
        """
        yaml = _require_yaml()
        with open(Path(path)) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise InvalidArgumentError(
                "config", f"expected a mapping, got {type(data).__name__}"
            )
        return cls.from_dict(data)
