# -*- coding: utf-8 -*-
"""
Evaluation and Relation Matrices
================================

Sparse labelled matrices backed by a ``pandas.DataFrame`` where NaN means
"absent":

- :class:`Evaluations` maps (alternative, criterion) to a performance;
- :class:`RelationMatrix` maps (alternative, alternative) to a value,
  typically a concordance, discordance or outranking credibility in [0, 1].

Both are filled through ``put`` and read through ``get``, which returns
``None`` for absent cells. Row and column order is the insertion order.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .base import Alternative, Criterion, as_alternative, as_criterion


class _LabelledMatrix:
    """Common storage for labelled sparse matrices."""

    _row_type: Callable = staticmethod(as_alternative)
    _column_type: Callable = staticmethod(as_alternative)

    def __init__(self, frame: Optional[pd.DataFrame] = None):
        if frame is None:
            self._frame = pd.DataFrame(dtype=float)
        else:
            self._frame = frame.astype(float).copy()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_frame(cls, frame: pd.DataFrame):
        """Build a matrix from a DataFrame whose labels are ids or objects."""
        relabelled = frame.copy()
        relabelled.index = pd.Index([cls._row_type(i) for i in frame.index], dtype=object)
        relabelled.columns = pd.Index([cls._column_type(c) for c in frame.columns], dtype=object)
        return cls(relabelled)

    @classmethod
    def from_array(cls, rows: Sequence, columns: Sequence, values: np.ndarray):
        """Build a matrix from a dense array, NaN cells being absent."""
        return cls(pd.DataFrame(
            np.asarray(values, dtype=float),
            index=pd.Index([cls._row_type(r) for r in rows], dtype=object),
            columns=pd.Index([cls._column_type(c) for c in columns], dtype=object),
        ))

    @classmethod
    def from_dict(cls, values: Dict):
        """Build a matrix from a nested mapping ``{row: {column: value}}``."""
        matrix = cls()
        for row, cells in values.items():
            for column, value in cells.items():
                matrix.put(row, column, value)
        return matrix

    def copy(self):
        return type(self)(self._frame)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def put(self, row, column, value: float) -> None:
        row, column = self._row_type(row), self._column_type(column)
        if value is None or np.isnan(value):
            raise ValueError(f"Cannot store an absent value at ({row}, {column})")
        if row not in self._frame.index:
            self._frame = self._frame.reindex(
                index=pd.Index(list(self._frame.index) + [row], dtype=object))
        if column not in self._frame.columns:
            self._frame = self._frame.reindex(
                columns=pd.Index(list(self._frame.columns) + [column], dtype=object))
        self._frame.at[row, column] = float(value)

    def get(self, row, column) -> Optional[float]:
        row, column = self._row_type(row), self._column_type(column)
        if row not in self._frame.index or column not in self._frame.columns:
            return None
        value = self._frame.at[row, column]
        return None if pd.isna(value) else float(value)

    def remove(self, row, column) -> None:
        row, column = self._row_type(row), self._column_type(column)
        if row in self._frame.index and column in self._frame.columns:
            self._frame.at[row, column] = np.nan

    def __contains__(self, key) -> bool:
        row, column = key
        return self.get(row, column) is not None

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> List:
        """Row labels having at least one present value."""
        present = self._frame.notna().any(axis=1).to_numpy()
        return [r for r, keep in zip(self._frame.index, present) if keep]

    @property
    def columns(self) -> List:
        """Column labels having at least one present value."""
        present = self._frame.notna().any(axis=0).to_numpy()
        return [c for c, keep in zip(self._frame.columns, present) if keep]

    def value_count(self) -> int:
        return int(self._frame.notna().sum().sum())

    def is_empty(self) -> bool:
        return self.value_count() == 0

    def is_complete(self) -> bool:
        """Whether every (row, column) pair among present labels has a value."""
        return self.value_count() == len(self.rows) * len(self.columns)

    def values(self, rows: Sequence, columns: Sequence) -> np.ndarray:
        """
        Dense float array for the given labels, NaN where absent.

        Labels unknown to the matrix yield NaN rows or columns.
        """
        rows = [self._row_type(r) for r in rows]
        columns = [self._column_type(c) for c in columns]
        dense = self._frame.reindex(index=pd.Index(rows, dtype=object),
                                    columns=pd.Index(columns, dtype=object))
        return dense.to_numpy(dtype=float)

    def _restricted(self, rows: Iterable, columns: Iterable):
        rows = [self._row_type(r) for r in rows]
        columns = [self._column_type(c) for c in columns]
        frame = self._frame.reindex(index=pd.Index(rows, dtype=object),
                                    columns=pd.Index(columns, dtype=object))
        return type(self)(frame.dropna(how='all').dropna(axis=1, how='all'))

    def merge(self, other):
        """
        Union of two matrices; ``other`` wins where both hold a value.

        Returns
        -------
        Same type as ``self``, a new object.
        """
        known_rows, known_columns = set(self._frame.index), set(self._frame.columns)
        rows = list(self._frame.index) + [r for r in other._frame.index if r not in known_rows]
        columns = list(self._frame.columns) + [
            c for c in other._frame.columns if c not in known_columns]
        index = pd.Index(rows, dtype=object)
        cols = pd.Index(columns, dtype=object)
        left = self._frame.reindex(index=index, columns=cols)
        right = other._frame.reindex(index=index, columns=cols)
        return type(self)(right.where(right.notna(), left))

    def to_frame(self, use_ids: bool = False) -> pd.DataFrame:
        """
        Copy of the present rows and columns as a DataFrame.

        Parameters
        ----------
        use_ids : bool
            Label the frame with string ids instead of objects.
        """
        frame = self._frame.reindex(index=pd.Index(self.rows, dtype=object),
                                    columns=pd.Index(self.columns, dtype=object))
        if use_ids:
            frame.index = [str(r) for r in frame.index]
            frame.columns = [str(c) for c in frame.columns]
        return frame

    def approx_equals(self, other, tolerance: float = 1e-6) -> bool:
        """Same present cells, with values equal within ``tolerance``."""
        if set(self.rows) != set(other.rows) or set(self.columns) != set(other.columns):
            return False
        rows, columns = self.rows, self.columns
        mine = self.values(rows, columns)
        theirs = other.values(rows, columns)
        if not np.array_equal(np.isnan(mine), np.isnan(theirs)):
            return False
        present = ~np.isnan(mine)
        return bool(np.all(np.abs(mine[present] - theirs[present]) <= tolerance))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({len(self.rows)}x{len(self.columns)}, "
                f"{self.value_count()} values)")


class Evaluations(_LabelledMatrix):
    """Performances of alternatives (rows) on criteria (columns)."""

    _row_type = staticmethod(as_alternative)
    _column_type = staticmethod(as_criterion)

    @property
    def alternatives(self) -> List[Alternative]:
        return self.rows

    @property
    def criteria(self) -> List[Criterion]:
        return self.columns

    def restrict_rows(self, alternatives: Iterable) -> 'Evaluations':
        """Evaluations of the given alternatives only, all criteria kept."""
        return self._restricted(alternatives, self.columns)


class RelationMatrix(_LabelledMatrix):
    """Binary or valued relation over alternatives."""

    _row_type = staticmethod(as_alternative)
    _column_type = staticmethod(as_alternative)

    def is_square(self) -> bool:
        return set(self.rows) == set(self.columns)

    def is_binary(self, tolerance: float = 0.0) -> bool:
        """Whether every present value is within ``tolerance`` of 0 or 1."""
        values = self._frame.to_numpy(dtype=float)
        present = values[~np.isnan(values)]
        near = (np.abs(present) <= tolerance) | (np.abs(present - 1.0) <= tolerance)
        return bool(np.all(near))

    def restrict(self, rows: Iterable, columns: Optional[Iterable] = None) -> 'RelationMatrix':
        """Sub-relation on the given rows and columns (columns default to rows)."""
        rows = list(rows)
        return self._restricted(rows, rows if columns is None else columns)
