"""Test project structure and configuration."""

import tomli
from pathlib import Path


def test_pyproject_toml_exists():
    """Test that pyproject.toml exists."""
    project_root = Path(__file__).parent.parent
    pyproject_path = project_root / "pyproject.toml"
    assert pyproject_path.exists(), "pyproject.toml should exist"


def test_pyproject_toml_structure():
    """Test that pyproject.toml has the correct structure."""
    project_root = Path(__file__).parent.parent
    pyproject_path = project_root / "pyproject.toml"

    with open(pyproject_path, "rb") as f:
        data = tomli.load(f)

    assert "project" in data, "pyproject.toml should have [project] section"
    project = data["project"]
    assert project["name"] == "detect-agent", "Project name should be 'detect-agent'"
    assert project["version"] == "1.0.0", "Version should be 1.0.0"

    # Check required dependencies
    deps = " ".join(project["dependencies"])
    required_deps = ["typer", "rich", "pydantic-settings", "platformdirs", "pyyaml"]
    for dep in required_deps:
        assert dep in deps, f"Missing required dependency: {dep}"

    # Check test dependencies
    test_deps = " ".join(project["optional-dependencies"]["test"])
    assert "pytest" in test_deps, "Should have pytest in test dependencies"

    # Check scripts
    assert "detect-agent" in project["scripts"], "Should have detect-agent entry point"
