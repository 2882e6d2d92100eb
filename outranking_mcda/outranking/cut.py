# -*- coding: utf-8 -*-
"""Binarization of valued relations."""

import numpy as np

from ..structure import RelationMatrix


def cut_relation(matrix: RelationMatrix, threshold: float) -> RelationMatrix:
    """
    Cut a valued relation at ``threshold``.

    Parameters
    ----------
    matrix : RelationMatrix
        Valued relation, typically with values in [0, 1].
    threshold : float
        Values at or above it become 1, others 0. Absent cells stay absent.

    Returns
    -------
    RelationMatrix
    """
    if threshold is None:
        raise ValueError("Cut threshold is required")
    frame = matrix.to_frame()
    values = frame.to_numpy(dtype=float)
    cut = np.where(np.isnan(values), np.nan, (values >= threshold).astype(float))
    return RelationMatrix.from_array(frame.index, frame.columns, cut)
