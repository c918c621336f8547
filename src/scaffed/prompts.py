"""Terminal prompts: free text, numbered options and yes/no questions."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, TextIO

_TRUE_ANSWERS = ("y", "yes", "true")
_FALSE_ANSWERS = ("n", "no", "false")


@dataclass
class PromptConfig:
    """I/O configuration for prompt display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _display_options(title, options, output):
    print("", file=output)
    print(title, file=output)
    for i, option in enumerate(options):
        print(f"  {i + 1}) {option}", file=output)
    print("", file=output)


def _parse_choice(raw_input, option_count):
    raw_input = raw_input.strip()
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def _parse_bool(raw_input):
    answer = raw_input.strip().lower()
    if answer in _TRUE_ANSWERS:
        return True
    if answer in _FALSE_ANSWERS:
        return False
    return None


class Prompter:
    """Asks the user questions on the terminal."""

    def __init__(self, config: PromptConfig = None):
        self._config = config or PromptConfig()

    def prompt(self, title: str) -> str:
        """Ask a free-text question and return the answer as typed."""
        return self._read(f"{title} ")

    def prompt_options(self, title: str, options: Iterable) -> str:
        """Display numbered options and return the chosen option as a string.

        Re-prompts until a number within range is entered.
        """
        options = list(options)
        _display_options(title, options, self._config.output)
        prompt_text = f"Enter your choice (1-{len(options)}): "

        while True:
            choice = _parse_choice(self._read(prompt_text), len(options))
            if choice is not None:
                return str(options[choice - 1])
            print(
                f"Invalid choice. Please enter a number between 1 and {len(options)}.",
                file=self._config.output,
            )

    def prompt_bool(self, title: str) -> bool:
        """Ask a yes/no question, re-prompting until the answer parses."""
        while True:
            answer = _parse_bool(self._read(f"{title} [y/n] "))
            if answer is not None:
                return answer
            print("Please answer y or n.", file=self._config.output)

    def _read(self, prompt_text):
        try:
            return self._config.input_fn(prompt_text)
        except EOFError:
            print("", file=self._config.output)
            print("Input closed. Exiting.", file=self._config.output)
            sys.exit(1)
