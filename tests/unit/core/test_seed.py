"""Unit tests for seed data and YAML tree definitions."""

from pathlib import Path

import pytest

from dirsize.core.seed import (
    DEMO_TREE,
    ROOT_NAME,
    TreeDefinitionError,
    build_demo_tree,
    build_tree,
    load_tree_file,
)
from dirsize.core.tree import DirectoryNode, FileNode


@pytest.mark.unit
class TestDemoTree:
    """Test the fixed demo hierarchy."""

    def test_top_level_directories(self, demo_root: DirectoryNode) -> None:
        """Test the root holds the four demo directories."""
        assert demo_root.name == ROOT_NAME
        assert demo_root.parent is None
        assert sorted(child.name for child in demo_root.children) == [
            "documents",
            "empty",
            "music",
            "pictures",
        ]
        assert all(child.is_directory for child in demo_root.children)

    @pytest.mark.parametrize(
        ("directory", "expected"),
        [
            ("documents", 9_728_000),
            ("pictures", 3_584_000),
            ("music", 7_680_000),
            ("empty", 0),
        ],
    )
    def test_directory_sizes(self, demo_root: DirectoryNode, directory: str, expected: int) -> None:
        """Test each demo directory aggregates to the expected size."""
        node = demo_root.get_child(directory)
        assert node is not None
        assert node.get_size() == expected

    def test_total_size(self, demo_root: DirectoryNode) -> None:
        """Test the whole demo tree size."""
        assert demo_root.get_size() == 9_728_000 + 3_584_000 + 7_680_000

    def test_projects_nested_under_documents(self, demo_root: DirectoryNode) -> None:
        """Test the projects subdirectory and its files."""
        documents = demo_root.get_child("documents")
        assert isinstance(documents, DirectoryNode)
        projects = documents.get_child("projects")
        assert isinstance(projects, DirectoryNode)

        assert projects.path == "/documents/projects"
        assert projects.get_size() == 8_192_000
        project1 = projects.get_child("project1.zip")
        assert isinstance(project1, FileNode)
        assert project1.size == 5_120_000

    def test_each_call_builds_fresh_tree(self) -> None:
        """Test callers get independent trees."""
        assert build_demo_tree() is not build_demo_tree()

    def test_demo_definition_is_valid(self) -> None:
        """Test the demo mapping builds without errors."""
        root = build_tree(DEMO_TREE)
        assert root.get_size() == build_demo_tree().get_size()


@pytest.mark.unit
class TestBuildTree:
    """Test building trees from nested mappings."""

    def test_nested_mapping(self) -> None:
        """Test mappings become directories and integers become files."""
        root = build_tree({"a": {"b.txt": 10, "c": {"d.txt": 5}}, "e.txt": 1})

        a = root.get_child("a")
        assert isinstance(a, DirectoryNode)
        assert a.get_size() == 15
        assert root.get_size() == 16

    def test_none_value_is_empty_directory(self) -> None:
        """Test a bare YAML key becomes an empty directory."""
        root = build_tree({"empty": None})

        empty = root.get_child("empty")
        assert isinstance(empty, DirectoryNode)
        assert empty.get_size() == 0

    def test_custom_root_name(self) -> None:
        """Test the root name can be chosen."""
        assert build_tree({}, root_name="disk").name == "disk"

    def test_negative_size_reports_location(self) -> None:
        """Test invalid sizes name the offending entry."""
        with pytest.raises(TreeDefinitionError, match="/a/b.txt"):
            _ = build_tree({"a": {"b.txt": -5}})

    @pytest.mark.parametrize("value", [True, 1.5, "big", [1, 2]])
    def test_invalid_values_rejected(self, value: object) -> None:
        """Test values that are neither mappings nor integers are rejected."""
        with pytest.raises(TreeDefinitionError, match="/x"):
            _ = build_tree({"x": value})

    def test_invalid_name_rejected(self) -> None:
        """Test names containing a separator are rejected."""
        with pytest.raises(TreeDefinitionError, match="must not contain"):
            _ = build_tree({"a/b": 1})

    def test_non_string_name_rejected(self) -> None:
        """Test non-string keys are rejected."""
        with pytest.raises(TreeDefinitionError, match="Entry name must be a string"):
            _ = build_tree({2024: 1})


@pytest.mark.unit
class TestLoadTreeFile:
    """Test loading tree definitions from YAML files."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        """Test a valid YAML definition."""
        tree_file = tmp_path / "tree.yaml"
        _ = tree_file.write_text(
            "documents:\n"
            "  resume.pdf: 1024000\n"
            "  projects:\n"
            "    project1.zip: 5120000\n"
            "empty: {}\n"
        )

        root = load_tree_file(tree_file)

        assert root.get_size() == 6_144_000
        assert root.has_child("empty")

    def test_empty_file_is_empty_tree(self, tmp_path: Path) -> None:
        """Test an empty file yields an empty root."""
        tree_file = tmp_path / "tree.yaml"
        _ = tree_file.write_text("")

        root = load_tree_file(tree_file)

        assert root.children == ()

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises TreeDefinitionError."""
        with pytest.raises(TreeDefinitionError, match="not found"):
            _ = load_tree_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test a YAML syntax error is reported."""
        tree_file = tmp_path / "tree.yaml"
        _ = tree_file.write_text("documents: [unclosed\n")

        with pytest.raises(TreeDefinitionError, match="Failed to parse YAML"):
            _ = load_tree_file(tree_file)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Test a list at the root is rejected."""
        tree_file = tmp_path / "tree.yaml"
        _ = tree_file.write_text("- a\n- b\n")

        with pytest.raises(TreeDefinitionError, match="Expected YAML mapping"):
            _ = load_tree_file(tree_file)
