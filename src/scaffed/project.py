"""Project bootstrap: resolve the project and drive one scaffold end-to-end."""

import os
from dataclasses import dataclass
from pathlib import Path

from scaffed.errors import ScaffoldError


@dataclass(frozen=True)
class ProjectConfiguration:
    """The project name and the directory it is scaffolded into."""

    name: str
    directory: Path


def get_project(directory, prompter) -> ProjectConfiguration:
    """Build the project configuration from the directory argument and a name prompt."""
    name = prompter.prompt("What is the name of the project?")
    return ProjectConfiguration(name=name, directory=Path(directory))


def ensure_directory(project: ProjectConfiguration) -> None:
    """Create the project directory if needed; an existing one is used as-is."""
    if project.directory.is_dir():
        return
    if os.path.lexists(project.directory):
        raise ScaffoldError(f"Not a directory: {project.directory}")
    try:
        project.directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ScaffoldError(f"Failed creating {project.directory}: {e}") from e


def run(project: ProjectConfiguration, scaffold) -> None:
    """Configure and then apply scaffold for project."""
    ensure_directory(project)
    config = scaffold.configure(project)
    scaffold.scaffold(project, config)


def get_project_and_run(directory, prompter, scaffold) -> ProjectConfiguration:
    project = get_project(directory, prompter)
    run(project, scaffold)
    return project
