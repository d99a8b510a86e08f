from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

# Importing the modules registers their solvers.
from . import random_consistent  # noqa: F401
from . import letter_freq  # noqa: F401


def create_solver(solver_id: str) -> BaseSolver:
    """Instantiate a registered solver; ValueError lists the known ids."""
    cls = REGISTRY.get(solver_id)
    if cls is None:
        raise ValueError(f"Unknown solver id: {solver_id}. Available: {get_solver_ids()}")
    return cls()


def get_solver_ids() -> List[str]:
    return sorted(REGISTRY)


__all__ = ["BaseSolver", "REGISTRY", "register", "create_solver", "get_solver_ids"]
