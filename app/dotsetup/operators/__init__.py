"""Package operators for executing installations.

This module provides the abstract operator interface and the paru
implementation used for both repository and AUR packages.
"""

from dotsetup.operators.base import Operator
from dotsetup.operators.paru import ParuOperator

__all__ = ["Operator", "ParuOperator"]
