"""
    Value axes map data values onto canvas coordinates.

    An axis is attached to one edge of the data area. Axes on the top or bottom
    edge span the data area from left to right; axes on the left or right edge
    span it from bottom to top so that larger values are drawn higher.
"""
from __future__ import annotations

# standard libraries
import enum
import math
import typing

# third party libraries
import numpy
import numpy.typing

# local libraries
from nion.charting import StepGeometry
from nion.utils import Event
from nion.utils import Geometry

_NDArray = numpy.typing.NDArray[typing.Any]


class RectangleEdge(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_top_or_bottom(self) -> bool:
        return self in (RectangleEdge.TOP, RectangleEdge.BOTTOM)


def domain_edge_for(orientation: StepGeometry.PlotOrientation) -> RectangleEdge:
    return RectangleEdge.BOTTOM if orientation == StepGeometry.PlotOrientation.VERTICAL else RectangleEdge.LEFT


def range_edge_for(orientation: StepGeometry.PlotOrientation) -> RectangleEdge:
    return RectangleEdge.LEFT if orientation == StepGeometry.PlotOrientation.VERTICAL else RectangleEdge.BOTTOM


class LinearValueAxis:
    """A linear axis from lower to upper.

    Changing the range fires property_changed_event with the property name.
    """

    def __init__(self, lower: float = 0.0, upper: float = 1.0, inverted: bool = False) -> None:
        self.property_changed_event = Event.Event()
        self.modified_count = 0
        self.__lower = 0.0
        self.__upper = 0.0
        self.__inverted = inverted
        self.set_range(lower, upper)
        self.modified_count = 0

    @property
    def lower(self) -> float:
        return self.__lower

    @property
    def upper(self) -> float:
        return self.__upper

    @property
    def length(self) -> float:
        return self.__upper - self.__lower

    @property
    def inverted(self) -> bool:
        return self.__inverted

    @inverted.setter
    def inverted(self, value: bool) -> None:
        if value != self.__inverted:
            self.__inverted = value
            self.__notify("inverted")

    def set_range(self, lower: float, upper: float) -> None:
        lower = float(lower)
        upper = float(upper)
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise ValueError(f"Axis range must be finite, got [{lower}, {upper}]")
        if lower > upper:
            raise ValueError(f"Axis lower bound {lower} is greater than upper bound {upper}")
        if (lower, upper) != (self.__lower, self.__upper):
            self.__lower = lower
            self.__upper = upper
            self.__notify("range")

    def auto_range(self, values: _NDArray, margin: float = 0.05) -> None:
        """Fit the range to the finite values, padded by margin times the span.

        Leaves the range alone when there are no finite values.
        """
        values = numpy.asarray(values, dtype=float)
        finite_values = values[numpy.isfinite(values)]
        if finite_values.size == 0:
            return
        value_min = float(numpy.amin(finite_values))
        value_max = float(numpy.amax(finite_values))
        if value_min == value_max:
            self.set_range(value_min - 1.0, value_max + 1.0)
        else:
            padding = (value_max - value_min) * margin
            self.set_range(value_min - padding, value_max + padding)

    def value_to_canvas(self, value: float, data_rect: Geometry.FloatRect, edge: RectangleEdge) -> float:
        """Return the canvas coordinate of value. NaN maps to NaN."""
        if math.isnan(value):
            return math.nan
        if edge.is_top_or_bottom:
            start, end = data_rect.left, data_rect.right
        else:
            start, end = data_rect.bottom, data_rect.top
        if self.__inverted:
            start, end = end, start
        length = self.length
        if length == 0.0:
            return (start + end) / 2
        return start + (value - self.__lower) / length * (end - start)

    def canvas_to_value(self, coordinate: float, data_rect: Geometry.FloatRect, edge: RectangleEdge) -> float:
        """Return the value at the canvas coordinate; the inverse of value_to_canvas."""
        if math.isnan(coordinate):
            return math.nan
        if edge.is_top_or_bottom:
            start, end = data_rect.left, data_rect.right
        else:
            start, end = data_rect.bottom, data_rect.top
        if self.__inverted:
            start, end = end, start
        if end == start:
            return self.__lower + self.length / 2
        return self.__lower + (coordinate - start) / (end - start) * self.length

    def __notify(self, property_name: str) -> None:
        self.modified_count += 1
        self.property_changed_event.fire(property_name)


def are_axes_equal(axis1: typing.Optional[LinearValueAxis], axis2: typing.Optional[LinearValueAxis]) -> bool:
    if (axis1 is None) != (axis2 is None):
        return False
    if axis1 is None or axis2 is None:
        return True
    return axis1.lower == axis2.lower and axis1.upper == axis2.upper and axis1.inverted == axis2.inverted
