from ..domain.interfaces import IPrompt

class ConsolePrompt(IPrompt):
    """Reads answers from stdin."""

    def ask(self, question: str) -> str:
        try:
            return input(question)
        except EOFError:
            # No terminal attached: treat as an empty answer
            return ""
