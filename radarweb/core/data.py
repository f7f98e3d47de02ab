"""Radar chart dataset: ordered categories with one value per series.

The chart reads the dataset; it never mutates it. Call
RadarChart.notify_dataset_changed() after replacing or mutating a dataset.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence


@dataclass
class RadarDataSet:
    """One overlaid series. values[i] belongs to category i."""

    label: str = ""
    values: List[Optional[float]] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.values)

    def _finite_values(self) -> List[float]:
        return [v for v in self.values if v is not None and math.isfinite(v)]

    def y_min(self) -> Optional[float]:
        finite = self._finite_values()
        return min(finite) if finite else None

    def y_max(self) -> Optional[float]:
        finite = self._finite_values()
        return max(finite) if finite else None


@dataclass
class RadarData:
    """All series of a chart plus the category labels."""

    data_sets: List[RadarDataSet] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)

    def __iter__(self) -> Iterator[RadarDataSet]:
        return iter(self.data_sets)

    def __len__(self) -> int:
        return len(self.data_sets)

    @classmethod
    def from_series(cls, series: Sequence[Sequence[float]], labels: Sequence[str] = ()) -> "RadarData":
        return cls(
            data_sets=[RadarDataSet(label=f"series {i}", values=list(s)) for i, s in enumerate(series)],
            labels=list(labels),
        )

    def add_data_set(self, data_set: RadarDataSet) -> None:
        self.data_sets.append(data_set)

    @property
    def max_entry_count_set(self) -> Optional[RadarDataSet]:
        """The series with the most entries (first one on ties)."""
        if not self.data_sets:
            return None
        return max(self.data_sets, key=lambda s: s.entry_count)

    @property
    def entry_count(self) -> int:
        """Number of categories, which equals the number of slices."""
        largest = self.max_entry_count_set
        return largest.entry_count if largest is not None else 0

    def y_min(self) -> float:
        """Smallest finite value across all series; 0.0 when there is none."""
        mins = [m for m in (s.y_min() for s in self.data_sets) if m is not None]
        return min(mins) if mins else 0.0

    def y_max(self) -> float:
        """Largest finite value across all series; 0.0 when there is none."""
        maxs = [m for m in (s.y_max() for s in self.data_sets) if m is not None]
        return max(maxs) if maxs else 0.0

    def label_for(self, index: int) -> str:
        if 0 <= index < len(self.labels):
            return self.labels[index]
        return str(index)
