"""3D geometry value objects: bounding boxes and oriented boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ._core_geometry import MaterialTag, Point2D, Point3D


@dataclass(frozen=True)
class BoundingBox3D:
    """Axis-aligned 3D bounding box."""

    origin: Point3D
    size_x: float  # Width (left to right)
    size_y: float  # Depth (front to back)
    size_z: float  # Height (bottom to top)

    def __post_init__(self) -> None:
        if self.size_x < 0 or self.size_y < 0 or self.size_z < 0:
            raise ValueError("Bounding box dimensions must be non-negative")

    @property
    def max_point(self) -> Point3D:
        return self.origin.offset(self.size_x, self.size_y, self.size_z)

    def union(self, other: BoundingBox3D) -> BoundingBox3D:
        """Return the smallest box containing both boxes."""
        lo = Point3D(
            min(self.origin.x, other.origin.x),
            min(self.origin.y, other.origin.y),
            min(self.origin.z, other.origin.z),
        )
        a, b = self.max_point, other.max_point
        return BoundingBox3D(
            origin=lo,
            size_x=max(a.x, b.x) - lo.x,
            size_y=max(a.y, b.y) - lo.y,
            size_z=max(a.z, b.z) - lo.z,
        )


def _sub(a: Point3D, b: Point3D) -> tuple[float, float, float]:
    return (a.x - b.x, a.y - b.y, a.z - b.z)


def _cross(
    u: tuple[float, float, float], v: tuple[float, float, float]
) -> tuple[float, float, float]:
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def _dot(u: tuple[float, float, float], v: tuple[float, float, float]) -> float:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def _newell_normal(points: tuple[Point3D, ...]) -> tuple[float, float, float]:
    """Unnormalized polygon normal using Newell's method."""
    nx = ny = nz = 0.0
    count = len(points)
    for i in range(count):
        cur = points[i]
        nxt = points[(i + 1) % count]
        nx += (cur.y - nxt.y) * (cur.z + nxt.z)
        ny += (cur.z - nxt.z) * (cur.x + nxt.x)
        nz += (cur.x - nxt.x) * (cur.y + nxt.y)
    return (nx, ny, nz)


@dataclass(frozen=True)
class OrientedBox:
    """A planar face extruded along a vector: the universal emission primitive.

    Every carcass panel, front, hardware marker, countertop slab and
    backsplash is described as one OrientedBox. Rectangular panels use a
    four-point base face; the inside-corner bottom/top and the burner discs
    use polygon faces. Boxes are immutable descriptions consumed once by the
    rendering collaborator; geometry is only ever composed additively.

    Attributes:
        label: Semantic group name, e.g. "Carcass/Bottom" or "Fronts/Door 1".
        material: Material tag resolved by the MaterialManager.
        base: Planar base face vertices in order.
        extrusion: Vector the base face is swept along.
    """

    label: str
    material: MaterialTag
    base: tuple[Point3D, ...]
    extrusion: Point3D

    def __post_init__(self) -> None:
        if len(self.base) < 3:
            raise ValueError("Oriented box base face needs at least 3 points")

    @classmethod
    def from_extents(
        cls,
        label: str,
        material: MaterialTag,
        origin: Point3D,
        size_x: float,
        size_y: float,
        size_z: float,
    ) -> OrientedBox:
        """Build an axis-aligned box from its min corner and extents.

        The base face is drawn perpendicular to the thinnest extent and
        extruded by it, the way a panel is drawn and then given thickness.

        Args:
            label: Semantic group name.
            material: Material tag.
            origin: Minimum (front-bottom-left) corner.
            size_x: Extent along X.
            size_y: Extent along Y.
            size_z: Extent along Z.

        Returns:
            A new OrientedBox.
        """
        x0, y0, z0 = origin.x, origin.y, origin.z
        x1, y1, z1 = x0 + size_x, y0 + size_y, z0 + size_z
        thinnest = min(size_x, size_y, size_z)
        if thinnest == size_x:
            base = (
                Point3D(x0, y0, z0),
                Point3D(x0, y1, z0),
                Point3D(x0, y1, z1),
                Point3D(x0, y0, z1),
            )
            extrusion = Point3D(size_x, 0.0, 0.0)
        elif thinnest == size_y:
            base = (
                Point3D(x0, y0, z0),
                Point3D(x0, y0, z1),
                Point3D(x1, y0, z1),
                Point3D(x1, y0, z0),
            )
            extrusion = Point3D(0.0, size_y, 0.0)
        else:
            base = (
                Point3D(x0, y0, z0),
                Point3D(x1, y0, z0),
                Point3D(x1, y1, z0),
                Point3D(x0, y1, z0),
            )
            extrusion = Point3D(0.0, 0.0, size_z)
        return cls(label=label, material=material, base=base, extrusion=extrusion)

    @classmethod
    def from_polygon(
        cls,
        label: str,
        material: MaterialTag,
        points: list[Point2D] | tuple[Point2D, ...],
        z: float,
        height: float,
    ) -> OrientedBox:
        """Build a prism from a plan-view polygon extruded upward.

        Args:
            label: Semantic group name.
            material: Material tag.
            points: Polygon vertices in the XY plane, in order.
            z: Elevation of the base face.
            height: Extrusion distance along +Z.

        Returns:
            A new OrientedBox.
        """
        base = tuple(Point3D(p.x, p.y, z) for p in points)
        return cls(
            label=label,
            material=material,
            base=base,
            extrusion=Point3D(0.0, 0.0, height),
        )

    # --- Derived geometry ---

    @property
    def group(self) -> str:
        """Top-level group of the label ("Carcass", "Fronts", ...)."""
        return self.label.split("/", 1)[0]

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the base face."""
        return len(self.base)

    @property
    def vertices(self) -> tuple[Point3D, ...]:
        """Base face vertices followed by the swept (top) face vertices."""
        return self.base + tuple(p + self.extrusion for p in self.base)

    @property
    def extrude_axis(self) -> Literal["x", "y", "z"]:
        """Dominant axis of the extrusion vector."""
        e = self.extrusion
        magnitudes = {"x": abs(e.x), "y": abs(e.y), "z": abs(e.z)}
        return max(magnitudes, key=lambda axis: magnitudes[axis])  # type: ignore[return-value]

    @property
    def extents(self) -> tuple[float, float, float]:
        """(size_x, size_y, size_z) of the axis-aligned bounds."""
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        zs = [p.z for p in self.vertices]
        return (max(xs) - min(xs), max(ys) - min(ys), max(zs) - min(zs))

    @property
    def origin(self) -> Point3D:
        """Minimum corner of the axis-aligned bounds."""
        verts = self.vertices
        return Point3D(
            min(p.x for p in verts),
            min(p.y for p in verts),
            min(p.z for p in verts),
        )

    @property
    def size_x(self) -> float:
        return self.extents[0]

    @property
    def size_y(self) -> float:
        return self.extents[1]

    @property
    def size_z(self) -> float:
        return self.extents[2]

    @property
    def min_extent(self) -> float:
        return min(self.extents)

    @property
    def bounds(self) -> BoundingBox3D:
        size_x, size_y, size_z = self.extents
        return BoundingBox3D(self.origin, size_x, size_y, size_z)

    @property
    def is_rectangular(self) -> bool:
        return len(self.base) == 4

    def has_duplicate_vertices(self, eps: float) -> bool:
        """Check whether any two base vertices coincide within eps."""
        pts = self.base
        for i in range(len(pts)):
            for j in range(i + 1, len(pts)):
                dx, dy, dz = _sub(pts[i], pts[j])
                if abs(dx) < eps and abs(dy) < eps and abs(dz) < eps:
                    return True
        return False

    def is_degenerate(self, eps: float) -> bool:
        """Check for near-zero extent or duplicate base vertices."""
        return self.min_extent < eps or self.has_duplicate_vertices(eps)

    def translated(self, offset: Point3D) -> OrientedBox:
        """Return a copy moved by offset."""
        return OrientedBox(
            label=self.label,
            material=self.material,
            base=tuple(p + offset for p in self.base),
            extrusion=self.extrusion,
        )

    def plan_footprint(self) -> tuple[Point2D, ...]:
        """Plan-view (XY) outline of the box.

        Z-extruded boxes project their base polygon; other boxes project
        their axis-aligned bounds.
        """
        if self.extrude_axis == "z":
            return tuple(Point2D(p.x, p.y) for p in self.base)
        o = self.origin
        size_x, size_y, _ = self.extents
        return (
            Point2D(o.x, o.y),
            Point2D(o.x + size_x, o.y),
            Point2D(o.x + size_x, o.y + size_y),
            Point2D(o.x, o.y + size_y),
        )

    # --- Tessellation ---

    def get_faces(self) -> list[tuple[int, ...]]:
        """Return faces as vertex-index tuples with outward winding.

        Indices refer to ``vertices``: 0..n-1 are the base face and n..2n-1
        the swept face.
        """
        n = len(self.base)
        normal = _newell_normal(self.base)
        ext = self.extrusion.as_tuple()
        base_along_extrusion = _dot(normal, ext) > 0

        bottom = tuple(range(n))
        top = tuple(range(n, 2 * n))
        if base_along_extrusion:
            bottom = tuple(reversed(bottom))
        else:
            top = tuple(reversed(top))

        faces: list[tuple[int, ...]] = [bottom, top]
        for i in range(n):
            j = (i + 1) % n
            quad = (i, j, j + n, i + n)
            faces.append(quad if base_along_extrusion else tuple(reversed(quad)))
        return faces

    def get_triangles(self) -> list[tuple[int, int, int]]:
        """Triangulate every face, fanning polygons from a reflex vertex.

        An L-shaped hexagon is star-shaped about its reflex vertex, so a fan
        from that vertex is a valid triangulation; convex faces fan from
        their first vertex.
        """
        verts = self.vertices
        triangles: list[tuple[int, int, int]] = []
        for face in self.get_faces():
            points = tuple(verts[i] for i in face)
            start = _reflex_index(points)
            count = len(face)
            for k in range(1, count - 1):
                a = face[start]
                b = face[(start + k) % count]
                c = face[(start + k + 1) % count]
                triangles.append((a, b, c))
        return triangles


def _reflex_index(points: tuple[Point3D, ...]) -> int:
    """Index of the first reflex vertex of a planar polygon, or 0."""
    count = len(points)
    if count <= 4:
        return 0
    normal = _newell_normal(points)
    for k in range(count):
        prev_pt = points[k - 1]
        cur = points[k]
        nxt = points[(k + 1) % count]
        turn = _cross(_sub(cur, prev_pt), _sub(nxt, cur))
        if _dot(turn, normal) < 0:
            return k
    return 0
