"""
    Geometry for step line plots.

    A step joins two consecutive samples with axis aligned segments instead of a
    diagonal. The step is built in terms of a domain axis (independent values)
    and a range axis (measured values); the plot orientation decides which canvas
    axis plays which role, so the same construction draws both vertical and
    horizontal plots.

    All functions here are pure. Points are canvas coordinates; NaN marks a
    missing sample and is never drawn.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import enum
import math
import typing

# third party libraries
# None

# local libraries
from nion.utils import Geometry


class PlotOrientation(enum.Enum):
    """The orientation of a plot.

    VERTICAL plots have the domain axis along the canvas x-axis (values rising up
    the screen). HORIZONTAL plots have the domain axis along the canvas y-axis.
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclasses.dataclass(frozen=True)
class StepSegment:
    start: Geometry.FloatPoint
    end: Geometry.FloatPoint

    @property
    def is_defined(self) -> bool:
        return not any(math.isnan(v) for v in (self.start.x, self.start.y, self.end.x, self.end.y))


def domain_value(point: Geometry.FloatPoint, orientation: PlotOrientation) -> float:
    return point.x if orientation == PlotOrientation.VERTICAL else point.y


def range_value(point: Geometry.FloatPoint, orientation: PlotOrientation) -> float:
    return point.y if orientation == PlotOrientation.VERTICAL else point.x


def make_point(domain: float, range_: float, orientation: PlotOrientation) -> Geometry.FloatPoint:
    """Return the canvas point for a domain/range coordinate pair."""
    if orientation == PlotOrientation.VERTICAL:
        return Geometry.FloatPoint(x=domain, y=range_)
    return Geometry.FloatPoint(x=range_, y=domain)


def validate_step_point(step_point: float) -> float:
    """Return step_point as a float, raising ValueError if it is not in [0.0, 1.0]."""
    step_point = float(step_point)
    if math.isnan(step_point) or step_point < 0.0 or step_point > 1.0:
        raise ValueError(f"Requires step point in [0.0, 1.0], got {step_point}")
    return step_point


def build_step(p0: Geometry.FloatPoint, p1: Geometry.FloatPoint, orientation: PlotOrientation, step_point: float) -> typing.List[StepSegment]:
    """Build the segments of the step from p0 to p1.

    Two points at the same range level are joined by a single segment. Otherwise
    three segments are returned: a run at the level of p0, the riser, and a run
    at the level of p1. The riser sits at the fraction step_point of the way from
    p0 to p1 along the domain axis.

    A NaN anywhere in p0 or p1 makes the riser NaN, so no segment of the step is
    defined. step_point is expected to be validated when it is configured.
    """
    d0 = domain_value(p0, orientation)
    d1 = domain_value(p1, orientation)
    r0 = range_value(p0, orientation)
    r1 = range_value(p1, orientation)

    if r0 == r1:
        return [StepSegment(p0, p1)]

    # interpolated rather than d0 + f * (d1 - d0); lands exactly on d0 at 0.0 and on d1 at 1.0
    riser = (1.0 - step_point) * d0 + step_point * d1
    if math.isnan(r0) or math.isnan(r1):
        riser = math.nan

    riser_start = make_point(riser, r0, orientation)
    riser_end = make_point(riser, r1, orientation)
    return [StepSegment(p0, riser_start), StepSegment(riser_start, riser_end), StepSegment(riser_end, p1)]


def clip_segment(segment: StepSegment, rect: Geometry.FloatRect) -> typing.Tuple[bool, StepSegment]:
    """Clip the segment to rect using the Liang-Barsky algorithm.

    Returns a visible flag and the clipped segment. Points on the edge of the
    rectangle are inside. Undefined segments and rectangles without area are
    never visible; in that case the segment is returned unchanged.
    """
    if not segment.is_defined or not (rect.width > 0 and rect.height > 0):
        return False, segment

    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom
    x0, y0 = segment.start.x, segment.start.y
    dx = segment.end.x - x0
    dy = segment.end.y - y0

    t0 = 0.0
    t1 = 1.0
    for p, q in ((-dx, x0 - left), (dx, right - x0), (-dy, y0 - top), (dy, bottom - y0)):
        if p == 0.0:
            # parallel to this edge
            if q < 0.0:
                return False, segment
        else:
            r = q / p
            if p < 0.0:
                if r > t1:
                    return False, segment
                t0 = max(t0, r)
            else:
                if r < t0:
                    return False, segment
                t1 = min(t1, r)

    if t0 == 0.0 and t1 == 1.0:
        return True, segment

    def clamp(x: float, y: float) -> Geometry.FloatPoint:
        return Geometry.FloatPoint(x=min(max(x, left), right), y=min(max(y, top), bottom))

    start = clamp(x0 + t0 * dx, y0 + t0 * dy) if t0 > 0.0 else segment.start
    end = clamp(x0 + t1 * dx, y0 + t1 * dy) if t1 < 1.0 else segment.end
    return True, StepSegment(start, end)


def visible_step_segments(p0: Geometry.FloatPoint, p1: Geometry.FloatPoint, orientation: PlotOrientation,
                          step_point: float, clip_rect: Geometry.FloatRect) -> typing.List[StepSegment]:
    """Return the clipped, defined segments of the step from p0 to p1, in drawing order."""
    segments: typing.List[StepSegment] = list()
    for segment in build_step(p0, p1, orientation, step_point):
        if segment.is_defined:
            visible, clipped_segment = clip_segment(segment, clip_rect)
            if visible:
                segments.append(clipped_segment)
    return segments
