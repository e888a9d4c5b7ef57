"""Box collection with degenerate-geometry screening.

Every geometry service funnels its boxes through a BoxCollector. A box
whose extent is near zero, or whose base face repeats a vertex, is skipped
with a logged warning and a DEGENERATE_GEOMETRY diagnostic, so callers get
a partial cabinet plus a record of what was dropped instead of an error.
"""

from __future__ import annotations

import logging

from ..constants import DEGENERATE_EPSILON
from ..results import Diagnostic, DiagnosticKind, GeometryResult
from ..value_objects import MaterialTag, OrientedBox, Point2D, Point3D

logger = logging.getLogger(__name__)

__all__ = ["BoxCollector"]


class BoxCollector:
    """Accumulates oriented boxes in emission order.

    Args:
        prefix: Optional label prefix inserted after the group name, so
            "Carcass/Bottom" becomes "Carcass/Lower/Bottom" for prefix
            "Lower".
        offset: Translation applied to every collected box.
        eps: Minimum extent below which a box is degenerate.
    """

    def __init__(
        self,
        prefix: str = "",
        offset: Point3D | None = None,
        eps: float = DEGENERATE_EPSILON,
    ) -> None:
        self.prefix = prefix
        self.offset = offset or Point3D.zero()
        self.eps = eps
        self._boxes: list[OrientedBox] = []
        self._diagnostics: list[Diagnostic] = []

    def _label(self, label: str) -> str:
        if not self.prefix:
            return label
        group, _, rest = label.partition("/")
        return f"{group}/{self.prefix}/{rest}" if rest else f"{group}/{self.prefix}"

    def _skip(self, label: str, reason: str) -> None:
        logger.warning(f"Skipping degenerate box {label}: {reason}")
        self._diagnostics.append(
            Diagnostic(DiagnosticKind.DEGENERATE_GEOMETRY, reason, label)
        )

    def box(
        self,
        label: str,
        material: MaterialTag,
        origin: Point3D,
        size_x: float,
        size_y: float,
        size_z: float,
    ) -> OrientedBox | None:
        """Collect an axis-aligned box, or skip it if degenerate.

        Returns:
            The collected box, or None if it was skipped.
        """
        label = self._label(label)
        smallest = min(size_x, size_y, size_z)
        if smallest < self.eps:
            self._skip(
                label,
                f"extent {smallest:.4f} below {self.eps} "
                f"({size_x:.4f} x {size_y:.4f} x {size_z:.4f})",
            )
            return None
        box = OrientedBox.from_extents(
            label, material, origin + self.offset, size_x, size_y, size_z
        )
        self._boxes.append(box)
        return box

    def prism(
        self,
        label: str,
        material: MaterialTag,
        points: list[Point2D],
        z: float,
        height: float,
    ) -> OrientedBox | None:
        """Collect a plan-view polygon extruded upward, or skip it.

        Returns:
            The collected box, or None if it was skipped.
        """
        label = self._label(label)
        if len(points) < 3:
            self._skip(label, f"polygon has only {len(points)} points")
            return None
        if height < self.eps:
            self._skip(label, f"extrusion {height:.4f} below {self.eps}")
            return None
        box = OrientedBox.from_polygon(label, material, points, z, height).translated(
            self.offset
        )
        if box.is_degenerate(self.eps):
            self._skip(label, "polygon has duplicate vertices or zero area")
            return None
        self._boxes.append(box)
        return box

    def extend(self, result: GeometryResult) -> None:
        """Append boxes and diagnostics produced elsewhere."""
        self._boxes.extend(result.boxes)
        self._diagnostics.extend(result.diagnostics)

    def note(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic that is not tied to a skipped box."""
        self._diagnostics.append(diagnostic)

    def result(self) -> GeometryResult:
        return GeometryResult(
            boxes=tuple(self._boxes), diagnostics=tuple(self._diagnostics)
        )

    def __len__(self) -> int:
        return len(self._boxes)
