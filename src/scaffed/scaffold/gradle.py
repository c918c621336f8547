"""Scaffold for Gradle projects using the Kotlin DSL."""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import click

from scaffed.errors import ScaffoldError
from scaffed.file_io import write_file
from scaffed.process_runner import is_installed, run_command
from scaffed.prompts import Prompter
from scaffed.scaffold.scaffold import Scaffold, register_scaffold
from scaffed.settings import Settings
from scaffed.templates.template_renderer import render_template

SETTINGS_FILE = "settings.gradle.kts"
BUILD_FILE = "build.gradle.kts"

KOTLIN_PLUGIN_VERSION = "2.1.0"


class GradleLanguage(Enum):
    """Source language of a Gradle project."""

    JAVA = "Java"
    KOTLIN = "Kotlin"
    UNSPECIFIED = "Unspecified"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text: str) -> "GradleLanguage":
        """Parse a language name or alias; unknown input is UNSPECIFIED."""
        return _LANGUAGE_ALIASES.get(text.lower(), cls.UNSPECIFIED)

    @property
    def plugin(self) -> Optional[str]:
        """The plugins {} entry for this language, or None."""
        return _LANGUAGE_PLUGINS.get(self)


_LANGUAGE_ALIASES = {
    "java": GradleLanguage.JAVA,
    "j": GradleLanguage.JAVA,
    "kotlin": GradleLanguage.KOTLIN,
    "kt": GradleLanguage.KOTLIN,
}

_LANGUAGE_PLUGINS = {
    GradleLanguage.JAVA: "java",
    GradleLanguage.KOTLIN: f'kotlin("jvm") version "{KOTLIN_PLUGIN_VERSION}"',
}


@dataclass(frozen=True)
class GradleConfiguration:
    """Answers collected for a Gradle scaffold."""

    gradle_version: str
    group: str
    version: str
    language: GradleLanguage
    multi: bool
    subprojects: Optional[List[str]] = None

    def __post_init__(self):
        if self.multi != (self.subprojects is not None):
            raise ValueError("subprojects must be given if and only if multi is set")


def parse_subprojects(raw: str) -> List[str]:
    """Split a comma-separated subproject list, keeping whitespace as typed."""
    return raw.split(",")


@register_scaffold
class GradleScaffold(Scaffold):
    """Writes minimal Gradle descriptors and generates the Gradle wrapper."""

    name = "gradle"

    def __init__(self, prompter=None, runner=run_command, settings=None, env=None):
        self._prompter = prompter or Prompter()
        self._runner = runner
        self._settings = settings or Settings()
        self._env = env

    @property
    def gradle_command(self):
        return self._settings.gradle_command

    def ensure_installed(self):
        """Exit with status 1 unless Gradle can be run."""
        if not is_installed(self.gradle_command, self._runner, env=self._env):
            click.echo(
                f"Error: Gradle is not installed ('{self.gradle_command}' was not found on PATH)",
                err=True,
            )
            sys.exit(1)

    def configure(self, project) -> GradleConfiguration:
        self.ensure_installed()

        gradle_version = self._prompter.prompt("What Gradle version would you like to use?")
        group = self._prompter.prompt("What group ID would you like to use?")
        version = self._prompter.prompt("What version would you like your project to use?")
        language = GradleLanguage.parse(self._prompter.prompt_options(
            "What language would you like to use?",
            list(GradleLanguage),
        ))
        multi = self._prompter.prompt_bool("Would you like to use multiple modules?")
        subprojects = None
        if multi:
            subprojects = parse_subprojects(self._prompter.prompt(
                "What are the names of the subprojects? (Separated with a comma)"
            ))

        return GradleConfiguration(
            gradle_version=gradle_version,
            group=group,
            version=version,
            language=language,
            multi=multi,
            subprojects=subprojects,
        )

    def scaffold(self, project, config: GradleConfiguration) -> None:
        self.write_settings(project)
        self.write_build(project, config)
        if config.multi:
            # TODO: emit include(...) entries and per-subproject build files
            click.echo(
                "Note: multi-module layout is not generated yet; "
                f"subprojects {', '.join(config.subprojects)} were not created.",
                err=True,
            )
        self.setup_wrapper(project, config)

    def write_settings(self, project):
        content = render_template("settings.gradle.kts.j2", package=__package__, name=project.name)
        write_file(project.directory / SETTINGS_FILE, content)
        click.echo(f"Wrote {SETTINGS_FILE}")

    def write_build(self, project, config):
        content = render_template(
            "build.gradle.kts.j2", package=__package__, plugin=config.language.plugin,
        )
        write_file(project.directory / BUILD_FILE, content)
        click.echo(f"Wrote {BUILD_FILE}")

    def setup_wrapper(self, project, config):
        """Run `gradle wrapper` in the project directory with visible output."""
        args = ["wrapper", "--gradle-version", config.gradle_version]
        click.echo(f"Running: {' '.join([self.gradle_command] + args)}")
        returncode = self._runner(
            self.gradle_command, args, cwd=project.directory, silent=False, env=self._env,
        )
        if returncode != 0:
            raise ScaffoldError(
                f"'{self.gradle_command} wrapper' failed with exit code {returncode}"
            )
