"""The two-phase scaffold contract and the registry of scaffold backends."""

from scaffed.errors import ScaffoldError


class Scaffold:
    """Something that can scaffold a project for one build ecosystem.

    configure() gathers answers without touching the filesystem and returns
    a configuration value; scaffold() applies that value by writing files
    and running commands. Each phase runs once per project, in that order.
    """

    name = None

    def configure(self, project):
        """Return this scaffold's configuration for project, usually by prompting."""
        raise NotImplementedError

    def scaffold(self, project, config) -> None:
        """Materialize config for project on disk."""
        raise NotImplementedError


SCAFFOLDS = {}


def register_scaffold(cls):
    """Class decorator adding a Scaffold subclass to SCAFFOLDS under cls.name."""
    SCAFFOLDS[cls.name] = cls
    return cls


def create_scaffold(name: str, **kwargs) -> Scaffold:
    try:
        cls = SCAFFOLDS[name]
    except KeyError:
        available = ", ".join(sorted(SCAFFOLDS))
        raise ScaffoldError(f"Unknown scaffold '{name}' (available: {available})") from None
    return cls(**kwargs)
