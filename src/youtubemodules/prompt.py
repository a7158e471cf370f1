"""Blocking question/answer prompts on the console."""

from typing import Callable, Iterable, Iterator, Optional


class Prompt:
    """Line-based operator prompt.

    The input source is injectable so scripted answers can stand in for a
    terminal.
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        """Initialize prompt.

        Args:
            input_func: Callable taking the question text and returning the
                answer line. Defaults to the built-in ``input``.
        """
        self._input = input_func or input

    def ask(self, question: str) -> str:
        """Ask a question and block until the operator answers.

        Args:
            question: Question text shown to the operator

        Returns:
            The answer with surrounding whitespace removed
        """
        return self._input(question).strip()


class ScriptedPrompt(Prompt):
    """Prompt that replays a fixed sequence of answers."""

    def __init__(self, answers: Iterable[str]):
        self._answers: Iterator[str] = iter(answers)
        self.questions = []
        super().__init__(self._next_answer)

    def _next_answer(self, question: str) -> str:
        self.questions.append(question)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("No scripted answers left") from None
