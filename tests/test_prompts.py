"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from anybackend.cli._prompts import (
    collect_answers,
    prompt_feature,
    prompt_package_manager,
    prompt_project_name,
)
from anybackend.cli._types import Feature, PackageManager


class TestPromptProjectName:
    @patch("builtins.input", return_value="shop")
    def test_returns_typed_name(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == "shop"
        mock_input.assert_called_once()

    @patch("builtins.input", return_value="")
    def test_empty_answer_uses_default(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == "my-backend"

    @patch("builtins.input", side_effect=["   ", "\t", "shop"])
    def test_blank_answer_asks_again(self, mock_input: MagicMock, capsys) -> None:
        assert prompt_project_name() == "shop"
        assert mock_input.call_count == 3
        assert "Project name cannot be empty." in capsys.readouterr().out

    @patch("builtins.input", return_value="  shop  ")
    def test_answer_is_stripped(self, mock_input: MagicMock) -> None:
        assert prompt_project_name() == "shop"


class TestPromptFeature:
    @pytest.mark.parametrize("feature", list(Feature))
    @patch("builtins.input", return_value="")
    def test_empty_answer_uses_feature_default(
        self, mock_input: MagicMock, feature: Feature
    ) -> None:
        assert prompt_feature(feature) is feature.default

    @patch("builtins.input", return_value="n")
    def test_explicit_no(self, mock_input: MagicMock) -> None:
        assert prompt_feature(Feature.AUTH) is False

    @patch("builtins.input", return_value="yes")
    def test_explicit_yes(self, mock_input: MagicMock) -> None:
        assert prompt_feature(Feature.UPLOAD) is True


class TestPromptPackageManager:
    @patch("anybackend.cli._prompts.TerminalMenu")
    def test_returns_npm(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0

        assert prompt_package_manager() is PackageManager.NPM

    @patch("anybackend.cli._prompts.TerminalMenu")
    def test_returns_skip(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 3

        assert prompt_package_manager() is PackageManager.SKIP

    @patch("anybackend.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_package_manager()


class TestCollectAnswers:
    @patch("anybackend.cli._prompts.TerminalMenu")
    @patch("builtins.input", side_effect=["demo", "", "y", "n"])
    def test_asks_every_question_in_order(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        answers = collect_answers()

        assert answers == {
            "projectName": "demo",
            "includeAuth": True,
            "includeFileUpload": True,
            "includeEnv": False,
            "packageManager": PackageManager.PNPM,
        }
        assert mock_input.call_count == 4

    @patch("anybackend.cli._prompts.TerminalMenu")
    @patch("builtins.input")
    def test_provided_values_are_not_asked(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock
    ) -> None:
        answers = collect_answers(
            project_name="demo",
            features={Feature.AUTH: False, Feature.UPLOAD: False, Feature.ENV: True},
            package_manager=PackageManager.YARN,
        )

        assert answers["projectName"] == "demo"
        assert answers["includeAuth"] is False
        assert answers["includeEnv"] is True
        assert answers["packageManager"] is PackageManager.YARN
        mock_input.assert_not_called()
        mock_menu_cls.assert_not_called()

    @patch("anybackend.cli._prompts.TerminalMenu")
    @patch("builtins.input", return_value="n")
    def test_only_missing_toggle_is_asked(
        self, mock_input: MagicMock, mock_menu_cls: MagicMock
    ) -> None:
        answers = collect_answers(
            project_name="demo",
            features={Feature.AUTH: True, Feature.UPLOAD: None, Feature.ENV: True},
            package_manager=PackageManager.SKIP,
        )

        assert answers["includeFileUpload"] is False
        mock_input.assert_called_once()
