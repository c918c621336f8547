"""Render descriptor templates shipped beside the scaffold that uses them."""

import importlib.resources
from functools import lru_cache

import jinja2


@lru_cache(maxsize=None)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def render_template(template_name: str, *, package: str, **variables) -> str:
    """Render ``<package>.templates/<template_name>`` with variables.

    Args:
        template_name: Template filename (e.g. "build.gradle.kts.j2")
        package: The caller's package (pass __package__).
        **variables: Template variables.

    Raises:
        FileNotFoundError: If the template is not shipped with package.
        jinja2.UndefinedError: If the template uses a variable not given.
    """
    template_file = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    if not template_file.is_file():
        raise FileNotFoundError(f"Template not found: {package}.templates/{template_name}")
    source = template_file.read_text(encoding="utf-8")
    return _environment().from_string(source).render(**variables)
