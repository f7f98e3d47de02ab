"""Tests for the radar dataset."""

import math

from radarweb.core.data import RadarData, RadarDataSet


class TestRadarDataSet:
    def test_extrema_ignore_missing_values(self):
        ds = RadarDataSet(values=[3.0, None, math.nan, -2.0, 8.0])
        assert ds.y_min() == -2.0
        assert ds.y_max() == 8.0
        assert ds.entry_count == 5

    def test_empty(self):
        ds = RadarDataSet()
        assert ds.y_min() is None
        assert ds.y_max() is None


class TestRadarData:
    def test_entry_count_from_largest_set(self):
        data = RadarData.from_series([[1, 2, 3], [1, 2, 3, 4, 5], [1]])
        assert data.entry_count == 5
        assert data.max_entry_count_set is data.data_sets[1]

    def test_extrema_across_series(self):
        data = RadarData.from_series([[1, 2, 3], [-4, 10]])
        assert data.y_min() == -4
        assert data.y_max() == 10

    def test_empty_dataset(self):
        data = RadarData()
        assert data.entry_count == 0
        assert data.max_entry_count_set is None
        assert data.y_min() == 0.0
        assert data.y_max() == 0.0

    def test_label_for(self):
        data = RadarData.from_series([[1, 2, 3]], labels=["x", "y"])
        assert data.label_for(1) == "y"
        assert data.label_for(2) == "2"

    def test_add_data_set(self):
        data = RadarData()
        data.add_data_set(RadarDataSet(label="s", values=[1.0, 2.0]))
        assert len(data) == 1
        assert data.entry_count == 2
