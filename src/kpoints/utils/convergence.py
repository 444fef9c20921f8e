"""
Convergence criteria for the assign/update loop.

A run has converged when an assignment pass leaves every point in the same
cluster as the previous pass.
"""

from typing import Any, Dict, Optional

from ..base.interfaces import ConvergenceCriterion
from ..base.data_structures import AssignmentMatrix


class ChangeInAssignments(ConvergenceCriterion):
    """Convergence based on the number of points that change clusters.

    Before the first pass every point counts as unassigned, so the first
    check never reports convergence.
    """

    def __init__(self, max_changed: int = 0, patience: int = 1):
        """
        Args:
            max_changed: Largest number of changed points still counted as stable
            patience: Number of consecutive stable passes required
        """
        super().__init__()
        if max_changed < 0:
            raise ValueError(f"max_changed must be non-negative, got {max_changed}")
        if patience < 1:
            raise ValueError(f"patience must be at least 1, got {patience}")
        self.max_changed = max_changed
        self.patience = patience
        self._prev_assignments: Optional[AssignmentMatrix] = None
        self._stable_count = 0
        self.last_n_changed: Optional[int] = None

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized."""
        assignments = current_state['assignments']
        if not isinstance(assignments, AssignmentMatrix):
            assignments = AssignmentMatrix(assignments, current_state['n_clusters'])

        if self._prev_assignments is None:
            self._prev_assignments = AssignmentMatrix.unassigned(
                assignments.n_points, assignments.n_clusters
            )

        n_changed = assignments.n_changed(self._prev_assignments)
        self.last_n_changed = n_changed

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': n_changed / max(1, assignments.n_points)
        })

        if n_changed <= self.max_changed:
            self._stable_count += 1
            converged = self._stable_count >= self.patience
        else:
            self._stable_count = 0
            converged = False

        self._prev_assignments = assignments
        return converged

    def reset(self):
        """Forget previous assignments; the next check starts from unassigned."""
        super().reset()
        self._prev_assignments = None
        self._stable_count = 0
        self.last_n_changed = None
