"""dotsetup - Workstation bootstrap for an Arch Linux dotfiles repository."""

__version__ = "0.1.0"
