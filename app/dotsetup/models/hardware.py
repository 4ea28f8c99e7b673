"""Hardware selection models.

A hardware selection picks one graphics driver variant and one keyboard
layout variant. Each choice maps deterministically to a variant file in
the repository's options directory and a fixed destination inside the
Hyprland config tree.
"""

from dataclasses import dataclass
from enum import Enum


class GraphicsDriver(str, Enum):
    """Graphics driver choice."""

    NVIDIA = "nvidia"
    OTHER = "other"

    @property
    def menu_label(self) -> str:
        """Label shown in the interactive menu."""
        return "NVIDIA" if self is GraphicsDriver.NVIDIA else "AMD/Intel"


class KeyboardLayout(str, Enum):
    """Keyboard layout choice."""

    US = "us"
    LATAM = "latam"

    @property
    def menu_label(self) -> str:
        """Label shown in the interactive menu."""
        return self.value.upper()


@dataclass(frozen=True, slots=True)
class HardwareVariant:
    """A config variant file and where it is installed.

    Attributes:
        source: File name under the options directory.
        destination: File name under the Hyprland source directory.
        label: Human-readable description used in log messages.
    """

    source: str
    destination: str
    label: str


GRAPHICS_VARIANTS: dict[GraphicsDriver, HardwareVariant] = {
    GraphicsDriver.NVIDIA: HardwareVariant(
        source="nvidia.conf",
        destination="nvidia.conf",
        label="NVIDIA configuration",
    ),
    GraphicsDriver.OTHER: HardwareVariant(
        source="nvidia-dummy.conf",
        destination="nvidia.conf",
        label="Open Source driver configuration",
    ),
}

KEYBOARD_VARIANTS: dict[KeyboardLayout, HardwareVariant] = {
    KeyboardLayout.US: HardwareVariant(
        source="us.conf",
        destination="keyboard.conf",
        label="US keyboard layout",
    ),
    KeyboardLayout.LATAM: HardwareVariant(
        source="latam.conf",
        destination="keyboard.conf",
        label="LATAM keyboard layout",
    ),
}


@dataclass(frozen=True, slots=True)
class HardwareSelection:
    """The pair of hardware choices to apply.

    Attributes:
        graphics: Selected graphics driver.
        keyboard: Selected keyboard layout.
    """

    graphics: GraphicsDriver
    keyboard: KeyboardLayout

    @property
    def variants(self) -> tuple[HardwareVariant, HardwareVariant]:
        """Variants to apply, graphics first."""
        return GRAPHICS_VARIANTS[self.graphics], KEYBOARD_VARIANTS[self.keyboard]
