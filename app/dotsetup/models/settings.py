"""Settings models for a setup run.

This module defines the Pydantic models representing the settings.toml
structure. Every field has a default, so a missing settings file yields
the stock behavior: paru and stow, the base/dev/gui/aur package lists,
the Hyprland hardware variants, and the fixed finalization steps.

All relative paths are resolved against the dotfiles repository root,
except ``config_target`` and ``tpm_dir`` which are relative to home.
"""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dotsetup.models.hardware import GraphicsDriver, KeyboardLayout
from dotsetup.models.package import PackageSource

# Type alias for package list source in settings
PackageSourceType = Literal["repo", "aur"]


class PackageListEntry(BaseModel):
    """One entry of the package list policy table.

    Attributes:
        path: List file path relative to the repository root.
        source: Whether the list holds repository or AUR packages.
        required: If True, a missing file aborts the run. If False,
            a missing file is skipped.
    """

    model_config = ConfigDict(extra="forbid")

    path: Annotated[str, Field(min_length=1, description="List file path")]
    source: Annotated[PackageSourceType, Field(description="Package source")] = "repo"
    required: Annotated[bool, Field(description="Abort if the list is missing")] = True

    @property
    def package_source(self) -> PackageSource:
        """Source as a PackageSource enum value."""
        return PackageSource(self.source)


def _default_package_lists() -> list[PackageListEntry]:
    return [
        PackageListEntry(path="scripts/pkg_mgmt/base.lst"),
        PackageListEntry(path="scripts/pkg_mgmt/dev.lst"),
        PackageListEntry(path="scripts/pkg_mgmt/gui.lst"),
        PackageListEntry(path="scripts/pkg_mgmt/aur.lst", source="aur", required=False),
    ]


class PackagesSettings(BaseModel):
    """Package installation section.

    Attributes:
        helper: AUR helper executable used for every install.
        lists: Ordered package list policy table.
        strict: If True, any failed package makes the run exit non-zero.
    """

    model_config = ConfigDict(extra="forbid")

    helper: Annotated[str, Field(min_length=1, description="AUR helper executable")] = "paru"
    lists: Annotated[
        list[PackageListEntry],
        Field(default_factory=_default_package_lists, description="Package lists in order"),
    ]
    strict: Annotated[bool, Field(description="Fail the run on package errors")] = False


class HardwareSettings(BaseModel):
    """Hardware configuration section.

    Attributes:
        graphics: Preselected graphics driver; prompts when unset.
        keyboard: Preselected keyboard layout; prompts when unset.
        options_dir: Directory holding the variant files.
        target_dir: Directory the selected variants are copied into.
    """

    model_config = ConfigDict(extra="forbid")

    graphics: Annotated[GraphicsDriver | None, Field(description="Graphics driver")] = None
    keyboard: Annotated[KeyboardLayout | None, Field(description="Keyboard layout")] = None
    options_dir: Annotated[str, Field(description="Variant file directory")] = "options"
    target_dir: Annotated[
        str, Field(description="Variant destination directory")
    ] = "dots/.config/hypr/source"


class DotfilesSettings(BaseModel):
    """Dotfiles deployment section.

    Attributes:
        stow: Symlink-farm tool executable.
        config_tree: Config tree stowed into ``config_target``.
        config_target: Target for the config tree, relative to home.
        home_tree: Tree stowed directly into home.
    """

    model_config = ConfigDict(extra="forbid")

    stow: Annotated[str, Field(min_length=1, description="Stow executable")] = "stow"
    config_tree: Annotated[str, Field(description="Config tree")] = "dots/.config"
    config_target: Annotated[str, Field(description="Config tree target")] = ".config"
    home_tree: Annotated[str, Field(description="Home tree")] = "home"


class FinalizeSettings(BaseModel):
    """Post-install section.

    Attributes:
        groups: Groups the user is added to, in order.
        tpm_dir: Tmux plugin manager directory, relative to home.
        theming_tool: Wallpaper theming executable.
        wallpaper: Wallpaper image passed to the theming tool.
        shell: Shell executable set as the default login shell.
    """

    model_config = ConfigDict(extra="forbid")

    groups: Annotated[
        list[str],
        Field(default_factory=lambda: ["input", "seat", "video"], description="User groups"),
    ]
    tpm_dir: Annotated[str, Field(description="Tmux plugin manager")] = ".tmux/plugins/tpm"
    theming_tool: Annotated[str, Field(description="Theming tool")] = "matugen"
    wallpaper: Annotated[str, Field(description="Wallpaper image")] = "Wallpapers/garden.webp"
    shell: Annotated[str, Field(description="Default shell")] = "fish"

    @field_validator("groups")
    @classmethod
    def validate_groups(cls, v: list[str]) -> list[str]:
        """Reject empty group names."""
        if any(not group.strip() for group in v):
            msg = "Group names cannot be empty"
            raise ValueError(msg)
        return v


class Settings(BaseModel):
    """Complete settings for a setup run.

    Attributes:
        repo_dir: Dotfiles repository root. None means the current directory.
        packages: Package installation settings.
        hardware: Hardware configuration settings.
        dotfiles: Dotfiles deployment settings.
        finalize: Post-install settings.
    """

    model_config = ConfigDict(extra="forbid")

    repo_dir: Annotated[Path | None, Field(description="Dotfiles repository root")] = None
    packages: Annotated[PackagesSettings, Field(default_factory=PackagesSettings)]
    hardware: Annotated[HardwareSettings, Field(default_factory=HardwareSettings)]
    dotfiles: Annotated[DotfilesSettings, Field(default_factory=DotfilesSettings)]
    finalize: Annotated[FinalizeSettings, Field(default_factory=FinalizeSettings)]

    @property
    def required_tools(self) -> list[str]:
        """Executables that must exist before anything runs."""
        return [self.packages.helper, self.dotfiles.stow]
