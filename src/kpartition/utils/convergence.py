"""
Convergence criteria for the Lloyd loop.

A run has converged once no centroid moves between consecutive iterations.
Exact equality is the default; a tolerance may be requested instead.
"""

from typing import Dict, Any
import torch

from ..base.interfaces import ConvergenceCriterion


class CentroidShift(ConvergenceCriterion):
    """Convergence based on how far the centroids moved in one iteration."""

    def __init__(self, tol: float = 0.0, patience: int = 1):
        """
        Args:
            tol: Largest absolute coordinate change still counted as "not moved".
                 0.0 requires exact equality.
            patience: Number of consecutive stable iterations required
        """
        super().__init__()
        if tol < 0:
            raise ValueError(f"tol must be non-negative, got {tol}")
        if patience < 1:
            raise ValueError(f"patience must be at least 1, got {patience}")
        self.tol = tol
        self.patience = patience
        self._stable_count = 0

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare 'centers' against 'previous_centers' (both (K, d))."""
        current = current_state['centers']
        previous = current_state['previous_centers']

        if current.shape != previous.shape:
            raise ValueError(f"Center shapes differ: {tuple(previous.shape)} vs {tuple(current.shape)}")

        shift = torch.max(torch.abs(current - previous)).item() if current.numel() else 0.0
        if self.tol == 0.0:
            stable = torch.equal(current, previous)
        else:
            stable = shift <= self.tol

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_shift': shift,
            'stable': stable
        })

        if stable:
            self._stable_count += 1
            return self._stable_count >= self.patience
        self._stable_count = 0
        return False

    def reset(self):
        super().reset()
        self._stable_count = 0
