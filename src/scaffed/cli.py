"""Click entry point for scaffed."""

import os

import click

from scaffed.errors import with_error_handling
from scaffed.project import get_project_and_run
from scaffed.prompts import Prompter
from scaffed.scaffold.gradle import GradleScaffold
from scaffed.scaffold.scaffold import create_scaffold
from scaffed.settings import load_settings


@click.command("scaffed")
@click.argument("directory", type=click.Path(file_okay=False, path_type=str))
def main(directory):
    """Scaffold a new Gradle project in DIRECTORY.

    DIRECTORY is created if it does not exist.
    """
    settings = load_settings(os.environ)
    prompter = Prompter()
    with with_error_handling():
        scaffold = create_scaffold(
            GradleScaffold.name,
            prompter=prompter,
            settings=settings,
            env=settings.child_env(os.environ),
        )
        get_project_and_run(directory, prompter, scaffold)
