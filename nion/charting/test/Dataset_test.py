# standard libraries
import logging
import math
import typing
import unittest

# third party libraries
# None

# local libraries
from nion.charting import Dataset


class TaskGanttDataset(Dataset.GanttCategoryDataset):
    """Tasks as (start, end, percent complete, sub-intervals) keyed by (row, column)."""

    def __init__(self, row_keys, column_keys, tasks):
        self.__row_keys = list(row_keys)
        self.__column_keys = list(column_keys)
        self.__tasks = tasks

    @property
    def row_keys(self) -> typing.Sequence[typing.Hashable]:
        return self.__row_keys

    @property
    def column_keys(self) -> typing.Sequence[typing.Hashable]:
        return self.__column_keys

    def __task_value(self, row, column, subinterval, index):
        task = self.__tasks.get((row, column))
        if task is None:
            return None
        if subinterval is not None:
            return task[3][subinterval][index]
        return task[index]

    def get_start_value(self, row, column, subinterval=None):
        return self.__task_value(row, column, subinterval, 0)

    def get_end_value(self, row, column, subinterval=None):
        return self.__task_value(row, column, subinterval, 1)

    def get_percent_complete(self, row, column, subinterval=None):
        return self.__task_value(row, column, subinterval, 2)

    def get_sub_interval_count(self, row, column):
        task = self.__tasks.get((row, column))
        return len(task[3]) if task else 0


class TestDataset(unittest.TestCase):

    def setUp(self):
        self.gantt_dataset = TaskGanttDataset(
            ["Scheduled", "Actual"],
            ["Design", "Build"],
            {
                (0, 0): (0.0, 10.0, 1.0, []),
                (0, 1): (10.0, 30.0, 0.5, [(10.0, 18.0, 1.0), (20.0, 30.0, 0.2)]),
                (1, 1): (12.0, 25.0, 0.25, []),
            })

    def tearDown(self):
        pass

    def test_array_dataset_returns_values_by_series_and_item(self):
        dataset = Dataset.ArrayXYDataset()
        dataset.add_series("a", [0, 1, 2], [5.0, math.nan, 7.0])
        dataset.add_series("b", [0, 1], [1.0, 2.0])
        self.assertEqual(2, dataset.series_count)
        self.assertEqual("b", dataset.get_series_key(1))
        self.assertEqual(3, dataset.get_item_count(0))
        self.assertEqual(2.0, dataset.get_x_value(0, 2))
        self.assertEqual(7.0, dataset.get_y_value(0, 2))
        self.assertTrue(math.isnan(dataset.get_y_value(0, 1)))
        self.assertIsInstance(dataset.get_x_value(0, 0), float)
        self.assertEqual([1.0, 2.0], dataset.get_y_values(1).tolist())
        self.assertEqual(1, dataset.index_of_series("b"))

    def test_array_dataset_rejects_mismatched_series(self):
        dataset = Dataset.ArrayXYDataset()
        with self.assertRaises(ValueError):
            dataset.add_series("a", [0, 1, 2], [5.0, 6.0])
        with self.assertRaises(ValueError):
            dataset.add_series("a", [[0, 1]], [[5.0, 6.0]])
        self.assertEqual(0, dataset.series_count)

    def test_array_dataset_rejects_duplicate_series_key(self):
        dataset = Dataset.ArrayXYDataset()
        dataset.add_series("a", [0], [1])
        with self.assertRaises(ValueError):
            dataset.add_series("a", [0], [1])

    def test_array_dataset_remove_series(self):
        dataset = Dataset.ArrayXYDataset()
        dataset.add_series("a", [0], [1])
        dataset.add_series("b", [0], [2])
        dataset.remove_series("a")
        self.assertEqual(1, dataset.series_count)
        self.assertEqual("b", dataset.get_series_key(0))
        with self.assertRaises(KeyError):
            dataset.remove_series("a")

    def test_array_dataset_fires_changed_event_on_mutation(self):
        dataset = Dataset.ArrayXYDataset()
        changes = list()
        with dataset.dataset_changed_event.listen(changes.append):
            dataset.add_series("a", [0], [1])
            dataset.remove_series("a")
        self.assertEqual([dataset, dataset], changes)

    def test_array_dataset_raises_for_missing_item(self):
        dataset = Dataset.ArrayXYDataset()
        dataset.add_series("a", [0], [1])
        with self.assertRaises(IndexError):
            dataset.get_y_value(0, 5)
        with self.assertRaises(IndexError):
            dataset.get_series_key(3)

    def test_gantt_key_lookups_match_index_lookups(self):
        dataset = self.gantt_dataset
        self.assertEqual(2, dataset.row_count)
        self.assertEqual(2, dataset.column_count)
        self.assertEqual(dataset.get_start_value(0, 1), dataset.get_start_value_for_key("Scheduled", "Build"))
        self.assertEqual(30.0, dataset.get_end_value_for_key("Scheduled", "Build"))
        self.assertEqual(0.25, dataset.get_percent_complete_for_key("Actual", "Build"))
        self.assertEqual(2, dataset.get_sub_interval_count_for_key("Scheduled", "Build"))

    def test_gantt_sub_interval_values(self):
        dataset = self.gantt_dataset
        self.assertEqual(20.0, dataset.get_start_value_for_key("Scheduled", "Build", 1))
        self.assertEqual(18.0, dataset.get_end_value(0, 1, 0))
        self.assertEqual(0.2, dataset.get_percent_complete_for_key("Scheduled", "Build", 1))

    def test_gantt_missing_task_values_are_none(self):
        dataset = self.gantt_dataset
        self.assertIsNone(dataset.get_start_value_for_key("Actual", "Design"))
        self.assertIsNone(dataset.get_percent_complete(1, 0))
        self.assertEqual(0, dataset.get_sub_interval_count_for_key("Actual", "Design"))

    def test_gantt_unknown_keys_raise_key_error(self):
        dataset = self.gantt_dataset
        with self.assertRaises(KeyError):
            dataset.get_start_value_for_key("Planned", "Build")
        with self.assertRaises(KeyError):
            dataset.get_percent_complete_for_key("Actual", "Test")
        with self.assertRaises(KeyError):
            dataset.get_sub_interval_count_for_key("Planned", "Test")


if __name__ == '__main__':
    logging.getLogger().setLevel(logging.DEBUG)
    unittest.main()
