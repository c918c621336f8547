"""Tests for the Scaffold base class and the scaffold registry."""

import pytest

from scaffed.errors import ScaffoldError
from scaffed.scaffold.gradle import GradleScaffold
from scaffed.scaffold.scaffold import SCAFFOLDS, Scaffold, create_scaffold


class TestScaffoldBase:

    def test_configure_is_abstract(self, project):
        with pytest.raises(NotImplementedError):
            Scaffold().configure(project)

    def test_scaffold_is_abstract(self, project):
        with pytest.raises(NotImplementedError):
            Scaffold().scaffold(project, None)


class TestRegistry:

    def test_gradle_is_registered(self):
        assert SCAFFOLDS["gradle"] is GradleScaffold

    def test_create_scaffold_passes_arguments(self, runner):
        scaffold = create_scaffold("gradle", runner=runner)

        assert isinstance(scaffold, GradleScaffold)
        assert scaffold.gradle_command == "gradle"

    def test_unknown_scaffold(self):
        with pytest.raises(ScaffoldError, match="Unknown scaffold 'maven'"):
            create_scaffold("maven")
