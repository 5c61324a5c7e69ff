"""
    Chart entities: hot spots on the canvas with tool tip and URL text.
"""
from __future__ import annotations

# standard libraries
import dataclasses
import math
import typing

# third party libraries
# None

# local libraries
from nion.utils import Geometry

if typing.TYPE_CHECKING:
    from nion.charting import Dataset


@dataclasses.dataclass
class ChartEntity:
    area: Geometry.FloatRect
    tool_tip_text: typing.Optional[str]
    url_text: typing.Optional[str]
    series_key: typing.Hashable
    series: int
    item: int

    def contains_point(self, point: Geometry.FloatPoint) -> bool:
        area = self.area
        return area.left <= point.x <= area.right and area.top <= point.y <= area.bottom


class EntityCollection:

    def __init__(self) -> None:
        self.__entities: typing.List[ChartEntity] = list()

    def __len__(self) -> int:
        return len(self.__entities)

    def __iter__(self) -> typing.Iterator[ChartEntity]:
        return iter(self.__entities)

    def add(self, entity: ChartEntity) -> None:
        self.__entities.append(entity)

    def clear(self) -> None:
        self.__entities.clear()

    def get_entity_at(self, point: Geometry.FloatPoint) -> typing.Optional[ChartEntity]:
        # the last entity drawn is on top
        for entity in reversed(self.__entities):
            if entity.contains_point(point):
                return entity
        return None


def format_value(value: float) -> str:
    if math.isnan(value):
        return "nan"
    return "{0:g}".format(value)


def standard_tool_tip(dataset: Dataset.XYDataset, series: int, item: int) -> typing.Optional[str]:
    x = dataset.get_x_value(series, item)
    y = dataset.get_y_value(series, item)
    return f"{dataset.get_series_key(series)}: ({format_value(x)}, {format_value(y)})"
