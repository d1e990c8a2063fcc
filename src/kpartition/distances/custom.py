"""
User-supplied distance functions.

Wraps a plain Python callable so the engine can treat it like any other
metric. The callable receives two 1D float64 tensors and returns a number.
"""

from typing import Callable

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..exceptions import InvalidArgumentError


class CallableDistance(DistanceMetric):
    """Distance metric backed by an arbitrary function ``fn(a, b) -> float``.

    The function should be symmetric, non-negative and return 0 for identical
    inputs. Results are checked for being finite and non-negative.
    """

    def __init__(self, fn: Callable[[Tensor, Tensor], float], name: str = None):
        if not callable(fn):
            raise InvalidArgumentError(f"Distance function must be callable, got {type(fn)}")
        self.fn = fn
        self.name = name or getattr(fn, '__name__', 'custom')

    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        self._check_dimensions(points, center)

        values = [float(self.fn(row, center)) for row in points]
        distances = torch.tensor(values, dtype=points.dtype, device=points.device)

        if not torch.isfinite(distances).all():
            raise InvalidArgumentError(f"Distance function {self.name!r} returned a non-finite value")
        if (distances < 0).any():
            raise InvalidArgumentError(f"Distance function {self.name!r} returned a negative value")
        return distances

    def __repr__(self) -> str:
        return f"CallableDistance({self.name})"
