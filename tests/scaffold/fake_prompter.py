"""FakePrompter: test double for Prompter that replays canned answers."""


class FakePrompter:
    """Returns answers in order, whichever prompt method asks.

    Usage:
        fake = FakePrompter(["demo", "Java", True])
        fake.prompt("Name?")          # "demo"
        fake.prompt_options("Lang?", [...])  # "Java"
        fake.prompt_bool("Multi?")    # True
        assert fake.titles == ["Name?", "Lang?", "Multi?"]
    """

    def __init__(self, answers=()):
        self._answers = list(answers)
        self.calls = []

    @property
    def titles(self):
        return [title for _, title in self.calls]

    def _next(self, kind, title):
        self.calls.append((kind, title))
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {title}")
        return self._answers.pop(0)

    def prompt(self, title):
        return self._next("prompt", title)

    def prompt_options(self, title, options):
        self.options = [str(o) for o in options]
        return self._next("prompt_options", title)

    def prompt_bool(self, title):
        return self._next("prompt_bool", title)
