"""Unit tests for required tool checks."""

from collections.abc import Callable
from unittest.mock import MagicMock, patch

import pytest
from dotsetup.core.context import SetupContext
from dotsetup.core.dependencies import (
    MissingDependencyError,
    check_dependencies,
    find_missing_tools,
)


class TestFindMissingTools:
    """Tests for find_missing_tools function."""

    @patch("dotsetup.core.dependencies.command_exists")
    def test_keeps_order(self, mock_exists: MagicMock) -> None:
        """Missing tools are returned in the order given."""
        mock_exists.side_effect = lambda name: name == "git"

        assert find_missing_tools(["stow", "git", "paru"]) == ["stow", "paru"]

    @patch("dotsetup.core.dependencies.command_exists", return_value=True)
    def test_nothing_missing(self, mock_exists: MagicMock) -> None:
        """An empty list is returned when everything is installed."""
        assert find_missing_tools(["paru", "stow"]) == []


class TestCheckDependencies:
    """Tests for check_dependencies function."""

    @patch("dotsetup.core.dependencies.command_exists", return_value=True)
    def test_all_present(
        self,
        mock_exists: MagicMock,
        setup_ctx: SetupContext,
        log_messages: Callable[[], list[str]],
    ) -> None:
        """No error and no log lines when both tools are installed."""
        check_dependencies(setup_ctx)

        assert log_messages() == []

    @patch("dotsetup.core.dependencies.command_exists")
    def test_missing_paru(
        self,
        mock_exists: MagicMock,
        setup_ctx: SetupContext,
        log_messages: Callable[[], list[str]],
    ) -> None:
        """A missing AUR helper is logged with its hint and raised."""
        mock_exists.side_effect = lambda name: name != "paru"

        with pytest.raises(MissingDependencyError) as exc_info:
            check_dependencies(setup_ctx)

        assert exc_info.value.missing == ["paru"]
        assert log_messages() == ["ERROR: Missing paru - install AUR helper first"]

    @patch("dotsetup.core.dependencies.command_exists", return_value=False)
    def test_both_missing(
        self,
        mock_exists: MagicMock,
        setup_ctx: SetupContext,
        log_messages: Callable[[], list[str]],
    ) -> None:
        """Every missing tool gets its own ERROR line."""
        with pytest.raises(MissingDependencyError, match="paru, stow"):
            check_dependencies(setup_ctx)

        assert log_messages() == [
            "ERROR: Missing paru - install AUR helper first",
            "ERROR: Missing stow - install GNU Stow",
        ]

    @patch("dotsetup.core.dependencies.command_exists", return_value=False)
    def test_custom_helper_hint(
        self,
        mock_exists: MagicMock,
        setup_ctx: SetupContext,
        log_messages: Callable[[], list[str]],
    ) -> None:
        """A configured helper without a known hint gets the generic one."""
        setup_ctx.settings.packages.helper = "yay"

        with pytest.raises(MissingDependencyError):
            check_dependencies(setup_ctx)

        assert log_messages()[0] == "ERROR: Missing yay - install it first"
