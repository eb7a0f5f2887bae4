from collections.abc import Iterator

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import ANSI

from ircline.completion import LineCompleter
from ircline.constants import PROMPT_COLOR, PROMPT_RESET, PROMPT_SUFFIX
from ircline.state import CompletionState


class IrcCompleter(Completer):
    """Feeds :class:`LineCompleter` candidates to prompt_toolkit.

    Candidates are the text after the cursor, so they are inserted in place
    (``start_position=0``); the menu shows the whole word.
    """

    def __init__(self, line_completer: LineCompleter, state: CompletionState):
        self.line_completer = line_completer
        self.state = state

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterator[Completion]:
        typed = document.text_before_cursor.rsplit(" ", 1)[-1]
        candidates = self.line_completer.complete(
            document.text, document.cursor_position, self.state
        )
        for candidate in candidates:
            yield Completion(
                candidate,
                start_position=0,
                display=(typed + candidate).strip(),
            )


def build_prompt(current_target: str) -> ANSI:
    return ANSI(f"{PROMPT_COLOR}{current_target}{PROMPT_SUFFIX}{PROMPT_RESET}")
