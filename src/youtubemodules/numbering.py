"""Module numbering of uploaded videos.

Raw uploads are titled with a bare episode number (``"05"``, ``"12"``). A run
prefixes them with the operator's module number (``"3.5"``, ``"3.12"``) and
orders them by that episode number. A period in a title marks a video that has
already been numbered, so such videos are never picked up again.
"""

import functools
import re
from typing import Any, Dict, List, Optional

from .errors import InvalidInputError
from .logging_config import get_logger
from .prompt import Prompt

logger = get_logger(__name__)

MODULE_QUESTION = "\nEnter the module number: "
NUMBERED_MARKER = "."
PLACEHOLDER_DIGIT = "0"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse the integer at the start of a string.

    Trailing text is ignored, so ``"4abc"`` parses as 4.

    Args:
        text: Text to parse

    Returns:
        The parsed integer, or None when the text does not start with one
    """
    if not text:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def ask_module_number(prompt: Prompt, max_attempts: Optional[int] = None) -> int:
    """Ask the operator for a module number until a valid one is entered.

    Args:
        prompt: Prompt to read answers from
        max_attempts: Optional limit on invalid answers. None asks forever.

    Returns:
        The absolute value of the entered integer

    Raises:
        InvalidInputError: If max_attempts invalid answers were given
    """
    attempts = 0
    while True:
        answer = prompt.ask(MODULE_QUESTION)
        module = parse_int(answer)
        if module is not None:
            return abs(module)

        attempts += 1
        logger.warning("Module number must be an integer, try again")
        if max_attempts is not None and attempts >= max_attempts:
            raise InvalidInputError(attempts)


def is_eligible(title: Optional[str]) -> bool:
    """Check whether a title belongs to a video that still needs numbering."""
    return bool(title) and NUMBERED_MARKER not in title


def renumber_title(title: str, module: int) -> str:
    """Prefix a raw title with the module number.

    A leading ``'0'`` is a placeholder digit and is dropped. The prefix is
    the normalized integer from ``ask_module_number``, so answers ``"03"`` and
    ``"-3"`` both give ``"3."``.

    Args:
        title: Raw video title
        module: Module number

    Returns:
        Title in ``"<module>.<number>"`` form
    """
    if title.startswith(PLACEHOLDER_DIGIT):
        return f"{module}.{title[1:]}"
    return f"{module}.{title}"


def compare_titles(a: Optional[str], b: Optional[str], module: int) -> int:
    """Compare two numbered titles by the number after the module prefix.

    Titles whose suffix is not a number compare equal to everything.

    Returns:
        Negative, zero or positive, like a ``cmp`` function
    """
    if not a or not b:
        return 0
    start = len(f"{module}.")
    left = parse_int(a[start:])
    right = parse_int(b[start:])
    if left is None or right is None:
        return 0
    return left - right


def select_entries(entries: List[Dict[str, Any]], module: int) -> List[Dict[str, Any]]:
    """Filter, rename and sort playlist entries for one module.

    Args:
        entries: Video entries from the uploads playlist
        module: Module number

    Returns:
        New entry dicts for the eligible videos, renamed and in publish order.
        The raw title is kept under ``original_title``.
    """
    selected = []
    for entry in entries:
        title = entry.get("title")
        if not is_eligible(title):
            logger.debug("Skipping %s (%r)", entry.get("video_id"), title)
            continue
        renamed = dict(entry)
        renamed["original_title"] = title
        renamed["title"] = renumber_title(title, module)
        selected.append(renamed)

    return sorted(
        selected,
        key=functools.cmp_to_key(
            lambda a, b: compare_titles(a["title"], b["title"], module)
        ),
    )


def filter_rename_and_sort(
    entries: List[Dict[str, Any]],
    prompt: Prompt,
    max_attempts: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Ask for the module number, then select the entries to publish.

    Args:
        entries: Video entries from the uploads playlist
        prompt: Prompt used to ask for the module number
        max_attempts: Optional limit on invalid module answers

    Returns:
        Ordered selection of renamed entries
    """
    module = ask_module_number(prompt, max_attempts=max_attempts)
    logger.debug("Using module number %d", module)
    selection = select_entries(entries, module)
    logger.info("Selected %d of %d videos for module %d", len(selection), len(entries), module)
    return selection
