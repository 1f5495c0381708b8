"""Immutable 2D affine transform and float rectangle used for image placement."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RectF:
    """Axis-aligned rectangle stored as edges, in view units."""
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(cls, width: float, height: float) -> "RectF":
        return cls(0.0, 0.0, float(width), float(height))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class AffineTransform:
    """2x3 affine matrix mapping (x, y) -> (a*x + b*y + c, d*x + e*y + f).

    Every operation returns a new transform. The post_* methods compose the
    new operation after the existing one, so points are first mapped by
    ``self`` and then by the added operation.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @property
    def is_identity(self) -> bool:
        return self == AffineTransform()

    @property
    def translation(self) -> Tuple[float, float]:
        return (self.c, self.f)

    @property
    def scale(self) -> Tuple[float, float]:
        return (self.a, self.e)

    def post_concat(self, other: "AffineTransform") -> "AffineTransform":
        """Return ``other * self``: apply this transform, then ``other``."""
        return AffineTransform(
            a=other.a * self.a + other.b * self.d,
            b=other.a * self.b + other.b * self.e,
            c=other.a * self.c + other.b * self.f + other.c,
            d=other.d * self.a + other.e * self.d,
            e=other.d * self.b + other.e * self.e,
            f=other.d * self.c + other.e * self.f + other.f,
        )

    def post_translate(self, dx: float, dy: float) -> "AffineTransform":
        return AffineTransform(self.a, self.b, self.c + dx, self.d, self.e, self.f + dy)

    def post_scale(
        self, sx: float, sy: float, px: float = 0.0, py: float = 0.0
    ) -> "AffineTransform":
        """Scale by (sx, sy) about the pivot point (px, py)."""
        pivot_scale = AffineTransform(
            a=sx, c=px - sx * px,
            e=sy, f=py - sy * py,
        )
        return self.post_concat(pivot_scale)

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        return (
            self.a * x + self.b * y + self.c,
            self.d * x + self.e * y + self.f,
        )

    def map_rect(self, rect: RectF) -> RectF:
        """Map the four corners and return their axis-aligned bounds."""
        corners = [
            self.map_point(rect.left, rect.top),
            self.map_point(rect.right, rect.top),
            self.map_point(rect.right, rect.bottom),
            self.map_point(rect.left, rect.bottom),
        ]
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        return RectF(min(xs), min(ys), max(xs), max(ys))

    @property
    def determinant(self) -> float:
        return self.a * self.e - self.b * self.d

    def invert(self) -> "AffineTransform":
        det = self.determinant
        if det == 0:
            raise ValueError(f"Transform is not invertible: {self}")
        a = self.e / det
        b = -self.b / det
        d = -self.d / det
        e = self.a / det
        return AffineTransform(
            a=a, b=b, c=-(a * self.c + b * self.f),
            d=d, e=e, f=-(d * self.c + e * self.f),
        )

    def to_pil_data(self) -> Tuple[float, float, float, float, float, float]:
        """Coefficients for ``Image.transform(..., Image.AFFINE, data)``.

        Pillow maps each *output* pixel back to the input, so this is the
        inverse of the view transform.
        """
        inv = self.invert()
        return (inv.a, inv.b, inv.c, inv.d, inv.e, inv.f)
