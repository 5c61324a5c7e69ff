"""
    Crosshair tracking.

    Renderers submit one candidate point per drawn item. The state keeps the
    candidate nearest to the anchor (usually the mouse position on the canvas).
"""
from __future__ import annotations

# standard libraries
import math
import typing

# third party libraries
# None

# local libraries
from nion.charting import StepGeometry
from nion.utils import Geometry


class CrosshairState:
    """Collects the data point nearest to an anchor during a draw.

    Without an anchor every defined candidate replaces the previous one; missing
    samples (NaN) are skipped so the last defined point is kept.
    """

    def __init__(self, anchor: typing.Optional[Geometry.FloatPoint] = None) -> None:
        self.anchor = anchor
        self.crosshair_x = math.nan
        self.crosshair_y = math.nan
        self.dataset_index: typing.Optional[int] = None
        self.distance = math.inf
        self.update_count = 0

    @property
    def has_point(self) -> bool:
        return self.dataset_index is not None

    def update_crosshair_point(self, x: float, y: float, dataset_index: int, canvas_x: float, canvas_y: float,
                               orientation: StepGeometry.PlotOrientation) -> None:
        """Consider the data point (x, y) drawn at (canvas_x, canvas_y).

        canvas_x is the domain coordinate and canvas_y the range coordinate on the
        canvas, so the anchor is compared with its axes swapped for horizontal
        plots.
        """
        self.update_count += 1
        anchor = self.anchor
        if anchor is not None:
            anchor_x, anchor_y = anchor.x, anchor.y
            if orientation == StepGeometry.PlotOrientation.HORIZONTAL:
                anchor_x, anchor_y = anchor_y, anchor_x
            distance = math.hypot(canvas_x - anchor_x, canvas_y - anchor_y)
            # nan distances never win
            if distance < self.distance:
                self.__set_point(x, y, dataset_index, distance)
        elif not any(math.isnan(v) for v in (x, y, canvas_x, canvas_y)):
            self.__set_point(x, y, dataset_index, 0.0)

    def __set_point(self, x: float, y: float, dataset_index: int, distance: float) -> None:
        self.crosshair_x = x
        self.crosshair_y = y
        self.dataset_index = dataset_index
        self.distance = distance
