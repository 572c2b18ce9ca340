"""Package operators for executing package actions.

This module provides the abstract operator interface and the APT
implementation.
"""

from aptresolve.operators.apt import AptOperator
from aptresolve.operators.base import Operator

__all__ = ["AptOperator", "Operator"]
