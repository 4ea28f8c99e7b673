"""Unit tests for hardware selection models."""

from dotsetup.models.hardware import (
    GRAPHICS_VARIANTS,
    KEYBOARD_VARIANTS,
    GraphicsDriver,
    HardwareSelection,
    KeyboardLayout,
)


class TestVariantMapping:
    """Tests for the fixed choice-to-file mapping."""

    def test_graphics_variants(self) -> None:
        """Both graphics choices install over nvidia.conf."""
        assert GRAPHICS_VARIANTS[GraphicsDriver.NVIDIA].source == "nvidia.conf"
        assert GRAPHICS_VARIANTS[GraphicsDriver.OTHER].source == "nvidia-dummy.conf"
        assert {v.destination for v in GRAPHICS_VARIANTS.values()} == {"nvidia.conf"}

    def test_keyboard_variants(self) -> None:
        """Both layouts install over keyboard.conf."""
        assert KEYBOARD_VARIANTS[KeyboardLayout.US].source == "us.conf"
        assert KEYBOARD_VARIANTS[KeyboardLayout.LATAM].source == "latam.conf"
        assert {v.destination for v in KEYBOARD_VARIANTS.values()} == {"keyboard.conf"}

    def test_every_choice_mapped(self) -> None:
        """No enum member is missing from the mapping."""
        assert set(GRAPHICS_VARIANTS) == set(GraphicsDriver)
        assert set(KEYBOARD_VARIANTS) == set(KeyboardLayout)


class TestMenuLabels:
    """Tests for menu labels."""

    def test_graphics_labels(self) -> None:
        assert [g.menu_label for g in GraphicsDriver] == ["NVIDIA", "AMD/Intel"]

    def test_keyboard_labels(self) -> None:
        assert [k.menu_label for k in KeyboardLayout] == ["US", "LATAM"]


class TestHardwareSelection:
    """Tests for HardwareSelection."""

    def test_variants_graphics_first(self) -> None:
        """Variants are ordered graphics, then keyboard."""
        selection = HardwareSelection(graphics=GraphicsDriver.OTHER, keyboard=KeyboardLayout.US)

        graphics, keyboard = selection.variants

        assert graphics.label == "Open Source driver configuration"
        assert keyboard.label == "US keyboard layout"
