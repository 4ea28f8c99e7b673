"""Interactive hardware menus.

Numbered single-choice menus for the graphics driver and keyboard
layout. A menu repeats until a valid entry is given; there is no
cancel option. Choices already supplied on the command line or in
the settings file are not asked for.
"""

from collections.abc import Sequence
from typing import TypeVar

import typer

from dotsetup.core.orchestrator import HardwareChooser
from dotsetup.models.hardware import GraphicsDriver, HardwareSelection, KeyboardLayout
from dotsetup.models.settings import HardwareSettings
from dotsetup.utils.formatting import console, print_warning

OptionT = TypeVar("OptionT", GraphicsDriver, KeyboardLayout)


def _match_option(answer: str, options: Sequence[OptionT]) -> OptionT | None:
    """Match a menu answer by number, label, or value (case-insensitive)."""
    answer = answer.strip()
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(options):
            return options[index - 1]
        return None

    lowered = answer.lower()
    for option in options:
        if lowered in (option.value, option.menu_label.lower()):
            return option
    return None


def choose_option(prompt: str, options: Sequence[OptionT]) -> OptionT:
    """Show a numbered menu and return the chosen option.

    Args:
        prompt: Prompt text shown after the menu.
        options: Options in menu order.

    Returns:
        The selected option.
    """
    for index, option in enumerate(options, start=1):
        console.print(f"{index}) {option.menu_label}")

    while True:
        answer = typer.prompt(prompt, prompt_suffix=": ")
        choice = _match_option(answer, options)
        if choice is not None:
            return choice
        print_warning(f"Invalid choice '{answer}', enter 1-{len(options)}.")


def prompt_graphics_driver() -> GraphicsDriver:
    """Ask for the graphics driver."""
    return choose_option("Select graphics driver", list(GraphicsDriver))


def prompt_keyboard_layout() -> KeyboardLayout:
    """Ask for the keyboard layout."""
    return choose_option("Select keyboard layout", list(KeyboardLayout))


def build_hardware_chooser(
    settings: HardwareSettings,
    graphics: GraphicsDriver | None = None,
    keyboard: KeyboardLayout | None = None,
) -> HardwareChooser:
    """Create the hardware chooser used by the orchestrator.

    Precedence per choice: command line, then settings, then the menu.

    Args:
        settings: Hardware section of the settings.
        graphics: Graphics driver given on the command line.
        keyboard: Keyboard layout given on the command line.

    Returns:
        Callable returning the final HardwareSelection.
    """

    def choose() -> HardwareSelection:
        chosen_graphics = graphics or settings.graphics or prompt_graphics_driver()
        chosen_keyboard = keyboard or settings.keyboard or prompt_keyboard_layout()
        return HardwareSelection(graphics=chosen_graphics, keyboard=chosen_keyboard)

    return choose
