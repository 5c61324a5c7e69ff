"""
    A canvas item drawing an XY dataset as a step plot.

    The canvas item owns the axes, the renderer and the entity collection. Each
    repaint runs every renderer pass over every item of every series so that
    labels drawn in the last pass are never covered by lines.
"""
from __future__ import annotations

# standard libraries
import logging
import typing

# third party libraries
import numpy

# local libraries
from nion.charting import Crosshair
from nion.charting import Dataset
from nion.charting import Entities
from nion.charting import StepGeometry
from nion.charting import StepRenderer
from nion.charting import ValueAxis
from nion.ui import CanvasItem
from nion.ui import DrawingContext
from nion.ui import UserInterface
from nion.utils import Event
from nion.utils import Geometry


def draw_background(drawing_context: DrawingContext.DrawingContext, plot_rect: Geometry.FloatRect, background_color: typing.Optional[str]) -> None:
    with drawing_context.saver():
        drawing_context.begin_path()
        drawing_context.rect(plot_rect.left, plot_rect.top, plot_rect.width, plot_rect.height)
        drawing_context.fill_style = background_color
        drawing_context.fill()


def draw_frame(drawing_context: DrawingContext.DrawingContext, plot_rect: Geometry.FloatRect, frame_color: typing.Optional[str]) -> None:
    with drawing_context.saver():
        drawing_context.begin_path()
        drawing_context.rect(plot_rect.left, plot_rect.top, plot_rect.width, plot_rect.height)
        drawing_context.line_width = 1
        drawing_context.stroke_style = frame_color
        drawing_context.stroke()


class StepPlotCanvasItem(CanvasItem.AbstractCanvasItem):
    """Canvas item to draw a step plot.

    When auto_range is set, both axes are fitted to the dataset before drawing.
    Moving the mouse over the plot moves the crosshair anchor.
    """

    def __init__(self, renderer: typing.Optional[StepRenderer.StepRenderer] = None) -> None:
        super().__init__()
        self.__renderer = renderer or StepRenderer.StepRenderer()
        self.__dataset: typing.Optional[Dataset.XYDataset] = None
        self.__dataset_changed_listener: typing.Optional[Event.EventListener] = None
        self.__orientation = StepGeometry.PlotOrientation.VERTICAL
        self.__domain_axis = ValueAxis.LinearValueAxis()
        self.__range_axis = ValueAxis.LinearValueAxis()
        self.auto_range = True
        self.__auto_ranging = False
        self.background_color = "#FFF"
        self.frame_color = "#888"
        self.crosshair_anchor: typing.Optional[Geometry.FloatPoint] = None
        self.entities = Entities.EntityCollection()
        self.__crosshair_state: typing.Optional[Crosshair.CrosshairState] = None
        self.__renderer_state: typing.Optional[StepRenderer.StepRendererState] = None
        self.__renderer_changed_listener = self.__renderer.property_changed_event.listen(self.__property_changed)
        self.__domain_axis_changed_listener = self.__domain_axis.property_changed_event.listen(self.__axis_property_changed)
        self.__range_axis_changed_listener = self.__range_axis.property_changed_event.listen(self.__axis_property_changed)

    def close(self) -> None:
        if self.__dataset_changed_listener:
            self.__dataset_changed_listener.close()
            self.__dataset_changed_listener = None
        self.__renderer_changed_listener.close()
        self.__renderer_changed_listener = typing.cast(typing.Any, None)
        self.__domain_axis_changed_listener.close()
        self.__domain_axis_changed_listener = typing.cast(typing.Any, None)
        self.__range_axis_changed_listener.close()
        self.__range_axis_changed_listener = typing.cast(typing.Any, None)
        super().close()

    @property
    def renderer(self) -> StepRenderer.StepRenderer:
        return self.__renderer

    @property
    def domain_axis(self) -> ValueAxis.LinearValueAxis:
        return self.__domain_axis

    @domain_axis.setter
    def domain_axis(self, domain_axis: ValueAxis.LinearValueAxis) -> None:
        previous_domain_axis = self.__domain_axis
        self.__domain_axis_changed_listener.close()
        self.__domain_axis = domain_axis
        self.__domain_axis_changed_listener = domain_axis.property_changed_event.listen(self.__axis_property_changed)
        if not ValueAxis.are_axes_equal(previous_domain_axis, domain_axis):
            self.update()

    @property
    def range_axis(self) -> ValueAxis.LinearValueAxis:
        return self.__range_axis

    @range_axis.setter
    def range_axis(self, range_axis: ValueAxis.LinearValueAxis) -> None:
        previous_range_axis = self.__range_axis
        self.__range_axis_changed_listener.close()
        self.__range_axis = range_axis
        self.__range_axis_changed_listener = range_axis.property_changed_event.listen(self.__axis_property_changed)
        if not ValueAxis.are_axes_equal(previous_range_axis, range_axis):
            self.update()

    @property
    def dataset(self) -> typing.Optional[Dataset.XYDataset]:
        return self.__dataset

    @dataset.setter
    def dataset(self, dataset: typing.Optional[Dataset.XYDataset]) -> None:
        if self.__dataset_changed_listener:
            self.__dataset_changed_listener.close()
            self.__dataset_changed_listener = None
        self.__dataset = dataset
        if dataset:
            self.__dataset_changed_listener = dataset.dataset_changed_event.listen(self.__dataset_changed)
        self.update()

    @property
    def orientation(self) -> StepGeometry.PlotOrientation:
        return self.__orientation

    @orientation.setter
    def orientation(self, orientation: StepGeometry.PlotOrientation) -> None:
        if orientation != self.__orientation:
            self.__orientation = orientation
            self.update()

    @property
    def crosshair_state(self) -> typing.Optional[Crosshair.CrosshairState]:
        """Return the crosshair state of the last repaint."""
        return self.__crosshair_state

    @property
    def drawn_segment_count(self) -> int:
        return self.__renderer_state.drawn_segment_count if self.__renderer_state else 0

    def get_tool_tip_at(self, point: Geometry.FloatPoint) -> typing.Optional[str]:
        entity = self.entities.get_entity_at(point)
        return entity.tool_tip_text if entity else None

    def mouse_position_changed(self, x: int, y: int, modifiers: UserInterface.KeyboardModifiers) -> bool:
        self.crosshair_anchor = Geometry.FloatPoint(y=y, x=x)
        self.update()
        return True

    def mouse_exited(self) -> bool:
        self.crosshair_anchor = None
        self.update()
        return True

    def __property_changed(self, property_name: str) -> None:
        self.update()

    def __axis_property_changed(self, property_name: str) -> None:
        # axes fitted during a repaint are already drawn with their new range
        if not self.__auto_ranging:
            self.update()

    def __dataset_changed(self, dataset: Dataset.XYDataset) -> None:
        self.update()

    def __auto_range_axes(self, dataset: Dataset.XYDataset) -> None:
        x_values = list()
        y_values = list()
        for series in range(dataset.series_count):
            for item in range(dataset.get_item_count(series)):
                x_values.append(dataset.get_x_value(series, item))
                y_values.append(dataset.get_y_value(series, item))
        self.__auto_ranging = True
        try:
            self.__domain_axis.auto_range(numpy.array(x_values, dtype=float))
            self.__range_axis.auto_range(numpy.array(y_values, dtype=float))
        finally:
            self.__auto_ranging = False

    def _repaint(self, drawing_context: DrawingContext.DrawingContext) -> None:
        canvas_bounds = self.canvas_bounds
        if not canvas_bounds:
            return

        plot_rect = Geometry.FloatRect.from_tlhw(canvas_bounds.top, canvas_bounds.left, canvas_bounds.height - 1, canvas_bounds.width - 1)

        draw_background(drawing_context, plot_rect, self.background_color)

        dataset = self.__dataset
        renderer = self.__renderer
        self.entities.clear()
        self.__crosshair_state = None
        self.__renderer_state = None
        if dataset and plot_rect.width > 0 and plot_rect.height > 0:
            if self.auto_range:
                self.__auto_range_axes(dataset)

            crosshair_state = Crosshair.CrosshairState(self.crosshair_anchor)
            state = renderer.initialise(plot_rect, 0, self.entities)
            orientation = self.__orientation
            for pass_index in range(renderer.pass_count):
                for series in range(dataset.series_count):
                    for item in range(dataset.get_item_count(series)):
                        renderer.draw_item(drawing_context, state, orientation, self.__domain_axis, self.__range_axis,
                                           dataset, series, item, crosshair_state, pass_index)
            self.__crosshair_state = crosshair_state
            self.__renderer_state = state
        elif dataset:
            logging.debug("Step plot too small to draw (%s x %s)", plot_rect.width, plot_rect.height)

        draw_frame(drawing_context, plot_rect, self.frame_color)
