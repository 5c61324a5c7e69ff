"""
    Datasets supplying values to renderers.

    XYDataset is the interface the step renderer reads from. ArrayXYDataset keeps
    each series as a pair of numpy arrays. GanttCategoryDataset describes task
    data arranged by row (series) and column (category) with optional
    sub-intervals and percent complete values.
"""
from __future__ import annotations

# standard libraries
import abc
import typing

# third party libraries
import numpy
import numpy.typing

# local libraries
from nion.utils import Event

_NDArray = numpy.typing.NDArray[typing.Any]

SeriesKey = typing.Hashable


class XYDataset(abc.ABC):
    """A collection of series of (x, y) items.

    y values may be NaN to mark missing samples.
    """

    def __init__(self) -> None:
        self.dataset_changed_event = Event.Event()

    @property
    @abc.abstractmethod
    def series_count(self) -> int: ...

    @abc.abstractmethod
    def get_series_key(self, series: int) -> SeriesKey: ...

    @abc.abstractmethod
    def get_item_count(self, series: int) -> int: ...

    @abc.abstractmethod
    def get_x_value(self, series: int, item: int) -> float: ...

    @abc.abstractmethod
    def get_y_value(self, series: int, item: int) -> float: ...

    def index_of_series(self, key: SeriesKey) -> int:
        for series in range(self.series_count):
            if self.get_series_key(series) == key:
                return series
        raise KeyError(key)

    def _notify_dataset_changed(self) -> None:
        self.dataset_changed_event.fire(self)


class ArrayXYDataset(XYDataset):
    """An XY dataset holding each series as float arrays."""

    def __init__(self) -> None:
        super().__init__()
        self.__series: typing.List[typing.Tuple[SeriesKey, _NDArray, _NDArray]] = list()

    @property
    def series_count(self) -> int:
        return len(self.__series)

    def add_series(self, key: SeriesKey, x_values: typing.Sequence[float], y_values: typing.Sequence[float]) -> None:
        x_array = numpy.array(x_values, dtype=float)
        y_array = numpy.array(y_values, dtype=float)
        if x_array.ndim != 1 or x_array.shape != y_array.shape:
            raise ValueError(f"Series {key!r} requires one dimensional x and y values of equal length")
        if any(series_key == key for series_key, _, _ in self.__series):
            raise ValueError(f"Series {key!r} already exists")
        self.__series.append((key, x_array, y_array))
        self._notify_dataset_changed()

    def remove_series(self, key: SeriesKey) -> None:
        del self.__series[self.index_of_series(key)]
        self._notify_dataset_changed()

    def get_series_key(self, series: int) -> SeriesKey:
        return self.__series[series][0]

    def get_item_count(self, series: int) -> int:
        return self.__series[series][1].shape[0]

    def get_x_values(self, series: int) -> _NDArray:
        return self.__series[series][1]

    def get_y_values(self, series: int) -> _NDArray:
        return self.__series[series][2]

    def get_x_value(self, series: int, item: int) -> float:
        return float(self.__series[series][1][item])

    def get_y_value(self, series: int, item: int) -> float:
        return float(self.__series[series][2][item])


class GanttCategoryDataset(abc.ABC):
    """Task data by row and column, each task optionally split into sub-intervals.

    Index based accessors are abstract; the key based accessors resolve keys to
    indices and raise KeyError for unknown keys. A subinterval of None refers to
    the task as a whole. Values are None where undefined. Percent complete is a
    fraction between 0.0 and 1.0.
    """

    @property
    @abc.abstractmethod
    def row_keys(self) -> typing.Sequence[typing.Hashable]: ...

    @property
    @abc.abstractmethod
    def column_keys(self) -> typing.Sequence[typing.Hashable]: ...

    @abc.abstractmethod
    def get_start_value(self, row: int, column: int, subinterval: typing.Optional[int] = None) -> typing.Optional[float]: ...

    @abc.abstractmethod
    def get_end_value(self, row: int, column: int, subinterval: typing.Optional[int] = None) -> typing.Optional[float]: ...

    @abc.abstractmethod
    def get_percent_complete(self, row: int, column: int, subinterval: typing.Optional[int] = None) -> typing.Optional[float]: ...

    @abc.abstractmethod
    def get_sub_interval_count(self, row: int, column: int) -> int: ...

    @property
    def row_count(self) -> int:
        return len(self.row_keys)

    @property
    def column_count(self) -> int:
        return len(self.column_keys)

    def get_row_index(self, row_key: typing.Hashable) -> int:
        try:
            return list(self.row_keys).index(row_key)
        except ValueError:
            raise KeyError(row_key)

    def get_column_index(self, column_key: typing.Hashable) -> int:
        try:
            return list(self.column_keys).index(column_key)
        except ValueError:
            raise KeyError(column_key)

    def get_start_value_for_key(self, row_key: typing.Hashable, column_key: typing.Hashable, subinterval: typing.Optional[int] = None) -> typing.Optional[float]:
        return self.get_start_value(self.get_row_index(row_key), self.get_column_index(column_key), subinterval)

    def get_end_value_for_key(self, row_key: typing.Hashable, column_key: typing.Hashable, subinterval: typing.Optional[int] = None) -> typing.Optional[float]:
        return self.get_end_value(self.get_row_index(row_key), self.get_column_index(column_key), subinterval)

    def get_percent_complete_for_key(self, row_key: typing.Hashable, column_key: typing.Hashable, subinterval: typing.Optional[int] = None) -> typing.Optional[float]:
        return self.get_percent_complete(self.get_row_index(row_key), self.get_column_index(column_key), subinterval)

    def get_sub_interval_count_for_key(self, row_key: typing.Hashable, column_key: typing.Hashable) -> int:
        return self.get_sub_interval_count(self.get_row_index(row_key), self.get_column_index(column_key))
