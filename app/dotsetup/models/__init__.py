"""Data models for dotsetup.

This module exports the core data structures used throughout the application.
"""

from dotsetup.models.hardware import (
    GRAPHICS_VARIANTS,
    KEYBOARD_VARIANTS,
    GraphicsDriver,
    HardwareSelection,
    HardwareVariant,
    KeyboardLayout,
)
from dotsetup.models.package import PackageResult, PackageSource
from dotsetup.models.report import SetupReport
from dotsetup.models.settings import (
    DotfilesSettings,
    FinalizeSettings,
    HardwareSettings,
    PackageListEntry,
    PackagesSettings,
    Settings,
)
from dotsetup.models.step import StepResult, step_failed, step_ok

__all__ = [
    "GRAPHICS_VARIANTS",
    "KEYBOARD_VARIANTS",
    "DotfilesSettings",
    "FinalizeSettings",
    "GraphicsDriver",
    "HardwareSelection",
    "HardwareSettings",
    "HardwareVariant",
    "KeyboardLayout",
    "PackageListEntry",
    "PackageResult",
    "PackageSource",
    "PackagesSettings",
    "SetupReport",
    "Settings",
    "StepResult",
    "step_failed",
    "step_ok",
]
