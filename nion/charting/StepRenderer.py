"""
    A renderer drawing XY series as step lines.

    Drawing follows a two pass protocol. Pass 0 strokes the step from the
    previous item to the current item and records the current item for the
    crosshair and as a hot spot entity. Pass 1 draws item labels so that labels
    sit on top of every line.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import math
import typing

# third party libraries
# None

# local libraries
from nion.charting import Crosshair
from nion.charting import Dataset
from nion.charting import Entities
from nion.charting import StepGeometry
from nion.charting import ValueAxis
from nion.ui import DrawingContext
from nion.utils import Color
from nion.utils import Event
from nion.utils import Geometry

ItemTextGenerator = typing.Callable[[Dataset.XYDataset, int, int], typing.Optional[str]]

DEFAULT_STEP_POINT = 1.0
DEFAULT_STROKE_WIDTH = 1.0
DEFAULT_ENTITY_RADIUS = 3.0
DEFAULT_LABEL_FONT = "11px"
LABEL_OFFSET = 4.0

SERIES_COLORS = ("#1E90FF", "#FF0000", "#00FF00", "#0000FF", "#FFFF00", "#00FFFF", "#FF00FF", "#888888")


def default_item_label(dataset: Dataset.XYDataset, series: int, item: int) -> typing.Optional[str]:
    y = dataset.get_y_value(series, item)
    return Entities.format_value(y) if not math.isnan(y) else None


@dataclasses.dataclass
class StepRendererState:
    """Per draw state, shared by all items of one dataset."""
    data_rect: Geometry.FloatRect
    dataset_index: int = 0
    entities: typing.Optional[Entities.EntityCollection] = None
    drawn_segment_count: int = 0
    drawn_label_count: int = 0


class StepRenderer:
    """Draw series as steps.

    The step point is the fraction of the distance between two domain values at
    which the riser is drawn. 1.0 (the default) draws the riser at the second
    point, 0.0 at the first point.

    Every property change fires property_changed_event with the property name and
    increments modified_count.
    """

    pass_count = 2

    def __init__(self, tool_tip_generator: typing.Optional[ItemTextGenerator] = None,
                 url_generator: typing.Optional[ItemTextGenerator] = None) -> None:
        self.property_changed_event = Event.Event()
        self.modified_count = 0
        self.__step_point = DEFAULT_STEP_POINT
        self.__stroke_width = DEFAULT_STROKE_WIDTH
        self.__entity_radius = DEFAULT_ENTITY_RADIUS
        self.__item_labels_visible = False
        self.__label_font = DEFAULT_LABEL_FONT
        self.__series_stroke_colors: typing.Dict[int, str] = dict()
        self.__hidden_series: typing.Set[int] = set()
        self.__tool_tip_generator = tool_tip_generator
        self.__url_generator = url_generator
        self.__item_label_generator: ItemTextGenerator = default_item_label

    @property
    def step_point(self) -> float:
        return self.__step_point

    @step_point.setter
    def step_point(self, value: float) -> None:
        step_point = StepGeometry.validate_step_point(value)
        if step_point != self.__step_point:
            self.__step_point = step_point
            self.__notify("step_point")

    @property
    def stroke_width(self) -> float:
        return self.__stroke_width

    @stroke_width.setter
    def stroke_width(self, value: float) -> None:
        if not value > 0.0:
            raise ValueError(f"Stroke width must be positive, got {value}")
        if value != self.__stroke_width:
            self.__stroke_width = value
            self.__notify("stroke_width")

    @property
    def entity_radius(self) -> float:
        return self.__entity_radius

    @entity_radius.setter
    def entity_radius(self, value: float) -> None:
        if not value >= 0.0:
            raise ValueError(f"Entity radius must not be negative, got {value}")
        if value != self.__entity_radius:
            self.__entity_radius = value
            self.__notify("entity_radius")

    @property
    def item_labels_visible(self) -> bool:
        return self.__item_labels_visible

    @item_labels_visible.setter
    def item_labels_visible(self, value: bool) -> None:
        if value != self.__item_labels_visible:
            self.__item_labels_visible = value
            self.__notify("item_labels_visible")

    @property
    def label_font(self) -> str:
        return self.__label_font

    @label_font.setter
    def label_font(self, value: str) -> None:
        if value != self.__label_font:
            self.__label_font = value
            self.__notify("label_font")

    @property
    def tool_tip_generator(self) -> typing.Optional[ItemTextGenerator]:
        return self.__tool_tip_generator

    @tool_tip_generator.setter
    def tool_tip_generator(self, value: typing.Optional[ItemTextGenerator]) -> None:
        self.__tool_tip_generator = value
        self.__notify("tool_tip_generator")

    @property
    def url_generator(self) -> typing.Optional[ItemTextGenerator]:
        return self.__url_generator

    @url_generator.setter
    def url_generator(self, value: typing.Optional[ItemTextGenerator]) -> None:
        self.__url_generator = value
        self.__notify("url_generator")

    @property
    def item_label_generator(self) -> ItemTextGenerator:
        return self.__item_label_generator

    @item_label_generator.setter
    def item_label_generator(self, value: ItemTextGenerator) -> None:
        self.__item_label_generator = value
        self.__notify("item_label_generator")

    def get_series_stroke_color(self, series: int) -> str:
        return self.__series_stroke_colors.get(series, SERIES_COLORS[series % len(SERIES_COLORS)])

    def set_series_stroke_color(self, series: int, color: typing.Optional[str]) -> None:
        """Set the stroke color of the series; None restores the default color."""
        if color is None:
            self.__series_stroke_colors.pop(series, None)
        else:
            self.__series_stroke_colors[series] = color
        self.__notify("series_stroke_color")

    def is_series_visible(self, series: int) -> bool:
        return series not in self.__hidden_series

    def set_series_visible(self, series: int, visible: bool) -> None:
        if visible != self.is_series_visible(series):
            if visible:
                self.__hidden_series.discard(series)
            else:
                self.__hidden_series.add(series)
            self.__notify("series_visible")

    def initialise(self, data_rect: Geometry.FloatRect, dataset_index: int = 0,
                   entities: typing.Optional[Entities.EntityCollection] = None) -> StepRendererState:
        return StepRendererState(data_rect, dataset_index, entities)

    def draw_item(self, drawing_context: DrawingContext.DrawingContext, state: StepRendererState,
                  orientation: StepGeometry.PlotOrientation, domain_axis: ValueAxis.LinearValueAxis,
                  range_axis: ValueAxis.LinearValueAxis, dataset: Dataset.XYDataset, series: int, item: int,
                  crosshair_state: typing.Optional[Crosshair.CrosshairState], pass_index: int) -> None:
        """Draw a single item of a series for the given pass.

        Items are drawn in order; each item in pass 0 draws the step arriving from
        the previous item, so the first item of a series draws no line.
        """
        if not self.is_series_visible(series):
            return

        data_rect = state.data_rect
        domain_edge = ValueAxis.domain_edge_for(orientation)
        range_edge = ValueAxis.range_edge_for(orientation)

        x1 = dataset.get_x_value(series, item)
        y1 = dataset.get_y_value(series, item)
        domain1 = domain_axis.value_to_canvas(x1, data_rect, domain_edge)
        range1 = range_axis.value_to_canvas(y1, data_rect, range_edge)
        p1 = StepGeometry.make_point(domain1, range1, orientation)

        if pass_index == 0:
            if item > 0:
                x0 = dataset.get_x_value(series, item - 1)
                y0 = dataset.get_y_value(series, item - 1)
                domain0 = domain_axis.value_to_canvas(x0, data_rect, domain_edge)
                range0 = range_axis.value_to_canvas(y0, data_rect, range_edge)
                p0 = StepGeometry.make_point(domain0, range0, orientation)
                segments = StepGeometry.visible_step_segments(p0, p1, orientation, self.__step_point, data_rect)
                self.__draw_segments(drawing_context, segments, self.get_series_stroke_color(series))
                state.drawn_segment_count += len(segments)

            # one representative point per item, however many segments were drawn
            if crosshair_state is not None:
                crosshair_state.update_crosshair_point(x1, y1, state.dataset_index, domain1, range1, orientation)
            if state.entities is not None:
                self.__add_entity(state.entities, data_rect, dataset, series, item, p1)

        elif pass_index == 1:
            if self.__item_labels_visible:
                self.__draw_item_label(drawing_context, state, orientation, dataset, series, item, p1, y1 < 0.0)

    def __draw_segments(self, drawing_context: DrawingContext.DrawingContext,
                        segments: typing.Sequence[StepGeometry.StepSegment], stroke_color: str) -> None:
        if segments:
            with drawing_context.saver():
                drawing_context.begin_path()
                for segment in segments:
                    drawing_context.move_to(segment.start.x, segment.start.y)
                    drawing_context.line_to(segment.end.x, segment.end.y)
                drawing_context.line_width = self.__stroke_width
                drawing_context.stroke_style = Color.Color(stroke_color).color_str
                drawing_context.stroke()

    def __add_entity(self, entities: Entities.EntityCollection, data_rect: Geometry.FloatRect,
                     dataset: Dataset.XYDataset, series: int, item: int, p: Geometry.FloatPoint) -> None:
        # only points inside the data area get a hot spot; NaN points never do
        if not (data_rect.left <= p.x <= data_rect.right and data_rect.top <= p.y <= data_rect.bottom):
            return
        r = self.__entity_radius
        area = Geometry.FloatRect.from_tlhw(p.y - r, p.x - r, 2 * r, 2 * r)
        tool_tip_text = self.__tool_tip_generator(dataset, series, item) if self.__tool_tip_generator else None
        url_text = self.__url_generator(dataset, series, item) if self.__url_generator else None
        entities.add(Entities.ChartEntity(area, tool_tip_text, url_text, dataset.get_series_key(series), series, item))

    def __draw_item_label(self, drawing_context: DrawingContext.DrawingContext, state: StepRendererState,
                          orientation: StepGeometry.PlotOrientation, dataset: Dataset.XYDataset, series: int, item: int,
                          p: Geometry.FloatPoint, negative: bool) -> None:
        if math.isnan(p.x) or math.isnan(p.y):
            return
        text = self.__item_label_generator(dataset, series, item)
        if not text:
            return
        with drawing_context.saver():
            drawing_context.font = self.__label_font
            drawing_context.fill_style = Color.Color(self.get_series_stroke_color(series)).color_str
            if orientation == StepGeometry.PlotOrientation.VERTICAL:
                # above positive values, below negative values
                drawing_context.text_align = "center"
                drawing_context.text_baseline = "top" if negative else "bottom"
                drawing_context.fill_text(text, p.x, p.y + LABEL_OFFSET if negative else p.y - LABEL_OFFSET)
            else:
                # right of positive values, left of negative values
                drawing_context.text_align = "right" if negative else "left"
                drawing_context.text_baseline = "middle"
                drawing_context.fill_text(text, p.x - LABEL_OFFSET if negative else p.x + LABEL_OFFSET, p.y)
        state.drawn_label_count += 1

    def __notify(self, property_name: str) -> None:
        self.modified_count += 1
        self.property_changed_event.fire(property_name)
