"""Image view configuration and sample layout models with JSON serialization."""

from dataclasses import dataclass, field
from typing import List
import json

from models.gravity import Gravity, ScaleMode


@dataclass
class ImageViewConfig:
    """Gravity and scale mode applied to the image inside one view."""
    image_gravity: Gravity = Gravity.CENTER
    image_scale_mode: ScaleMode = ScaleMode.NONE

    def to_dict(self) -> dict:
        return {
            "image_gravity": self.image_gravity.to_string(),
            "image_scale_mode": self.image_scale_mode.name.lower(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "ImageViewConfig":
        """Accepts attribute-style strings ("top|left", "crop") or raw ints."""
        if not isinstance(d, dict):
            raise ValueError(f"View config must be an object, got {type(d).__name__}")
        config = cls()
        if "image_gravity" in d:
            config.image_gravity = Gravity.parse(d["image_gravity"])
        if "image_scale_mode" in d:
            config.image_scale_mode = ScaleMode.parse(d["image_scale_mode"])
        return config

    def save_json(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_json(cls, path: str) -> "ImageViewConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


@dataclass
class ViewSpec:
    """One view in the sample grid."""
    name: str
    width: int = 200
    height: int = 150
    config: ImageViewConfig = field(default_factory=ImageViewConfig)

    def to_dict(self) -> dict:
        d = {"name": self.name, "width": self.width, "height": self.height}
        d.update(self.config.to_dict())
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "ViewSpec":
        if not isinstance(d, dict) or "name" not in d:
            raise ValueError(f"View entry needs a name: {d!r}")
        spec = cls(**{k: v for k, v in d.items() if k in ("name", "width", "height")})
        spec.config = ImageViewConfig.from_dict(d)
        return spec


@dataclass
class SampleLayout:
    """Grid of views shown by the sample window."""
    columns: int = 3
    is_rtl: bool = False
    views: List[ViewSpec] = field(default_factory=list)

    @classmethod
    def default(cls) -> "SampleLayout":
        combos = [
            ("top|left", "none"), ("top", "inside"), ("top|right", "crop"),
            ("left", "inside"), ("center", "none"), ("right", "inside"),
            ("bottom|start", "crop"), ("bottom", "inside"), ("bottom|end", "none"),
        ]
        views = [
            ViewSpec(
                name=f"{gravity} / {mode}",
                config=ImageViewConfig.from_dict(
                    {"image_gravity": gravity, "image_scale_mode": mode}
                ),
            )
            for gravity, mode in combos
        ]
        return cls(views=views)

    def to_dict(self) -> dict:
        return {
            "columns": self.columns,
            "is_rtl": self.is_rtl,
            "views": [v.to_dict() for v in self.views],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "SampleLayout":
        if not isinstance(d, dict):
            raise ValueError(f"Layout must be an object, got {type(d).__name__}")
        d = dict(d)  # avoid mutating the input
        views_data = d.pop("views", [])
        if not isinstance(views_data, list):
            raise ValueError("Layout 'views' must be a list")
        layout = cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
        layout.views = [ViewSpec.from_dict(v) for v in views_data]
        return layout

    def save_json(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_json(cls, path: str) -> "SampleLayout":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
