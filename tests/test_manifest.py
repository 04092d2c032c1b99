"""
Tests for readmegen.manifest module.

Tests package.json loading, dotted lookups and project name detection.
"""

import json

import pytest

from readmegen.manifest import get_package_json, get_project_name, get_value


def write_package_json(directory, data):
    """Write a package.json into a directory."""
    (directory / "package.json").write_text(json.dumps(data), encoding="utf-8")


class TestGetPackageJson:
    """Tests for get_package_json."""

    def test_valid_package_json(self, tmp_path):
        """Test loading a valid manifest."""
        write_package_json(tmp_path, {"name": "app", "version": "1.2.3"})

        data = get_package_json(tmp_path)

        assert data == {"name": "app", "version": "1.2.3"}

    def test_missing_file(self, tmp_path):
        """Test that a missing manifest yields None."""
        assert get_package_json(tmp_path) is None

    def test_invalid_json(self, tmp_path):
        """Test that a malformed manifest yields None."""
        (tmp_path / "package.json").write_text("{ not json", encoding="utf-8")

        assert get_package_json(tmp_path) is None

    def test_non_object_json(self, tmp_path):
        """Test that a manifest that is not an object yields None."""
        (tmp_path / "package.json").write_text("[1, 2, 3]", encoding="utf-8")

        assert get_package_json(tmp_path) is None

    def test_directory_instead_of_file(self, tmp_path):
        """Test that an unreadable manifest yields None."""
        (tmp_path / "package.json").mkdir()

        assert get_package_json(tmp_path) is None

    def test_defaults_to_current_directory(self, tmp_path, monkeypatch):
        """Test that the current directory is used by default."""
        write_package_json(tmp_path, {"name": "from-cwd"})
        monkeypatch.chdir(tmp_path)

        assert get_package_json() == {"name": "from-cwd"}


class TestGetValue:
    """Tests for dotted key lookups."""

    @pytest.mark.parametrize(
        "data,path,expected",
        [
            ({"repository": {"url": "u"}}, "repository.url", "u"),
            ({"repository": "bob/app"}, "repository.url", None),
            ({"bugs": {}}, "bugs.url", None),
            ({}, "description", None),
            (None, "description", None),
            ({"engines": {"node": ">=18"}}, "engines", {"node": ">=18"}),
        ],
    )
    def test_lookup(self, data, path, expected):
        """Test lookups over present and absent keys."""
        assert get_value(data, path) == expected


class TestGetProjectName:
    """Tests for project name detection."""

    def test_name_from_package_json(self, tmp_path):
        """Test that package.json name wins."""
        write_package_json(tmp_path, {"name": "my-package"})

        assert get_project_name(tmp_path) == "my-package"

    def test_name_from_directory(self, tmp_path):
        """Test the directory name fallback without manifest."""
        project = tmp_path / "my-dir-project"
        project.mkdir()

        assert get_project_name(project) == "my-dir-project"

    def test_empty_name_falls_back_to_directory(self, tmp_path):
        """Test that an empty manifest name is ignored."""
        project = tmp_path / "fallback"
        project.mkdir()
        write_package_json(project, {"name": ""})

        assert get_project_name(project) == "fallback"
