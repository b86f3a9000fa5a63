"""Shared CLI prompt utilities.

Common input prompts with permissive defaults used across menu actions.
"""

from typing import Optional


def prompt_int(prompt: str, default: int, minimum: Optional[int] = 0) -> int:
    """Prompt for a whole number.

    Args:
        prompt: Question to ask
        default: Value used when the answer is empty
        minimum: Smallest accepted value, or None for no bound

    Returns:
        Parsed integer
    """
    while True:
        val = input(f"{prompt} (default {default}): ").strip()
        if not val:
            return default

        try:
            number = int(val)
        except ValueError:
            print("Invalid input. Enter a number.")
            continue

        if minimum is not None and number < minimum:
            print(f"Please enter a number of at least {minimum}.")
            continue
        return number


def prompt_yes_no(prompt: str, default: bool = False) -> bool:
    """Ask a y/n question; anything other than y/n gives the default."""
    hint = "Y/n" if default else "y/N"
    ans = input(f"{prompt} ({hint}): ").strip().lower()
    if ans in ['y', 'yes']:
        return True
    if ans in ['n', 'no']:
        return False
    return default


def prompt_text(prompt: str, default: str = "", strip: bool = True) -> str:
    """Prompt for free text, returning default when the answer is empty.

    With strip=False surrounding whitespace is kept, so a lone space is a
    valid answer.
    """
    val = input(f"{prompt}: ")
    if strip:
        val = val.strip()
    return val or default


def confirm_action(prompt: str, require_word: Optional[str] = None) -> bool:
    """Ask before a destructive or risky step.

    With require_word only that exact word confirms; otherwise y or yes does.
    """
    if require_word:
        return input(f"{prompt} Type {require_word} to confirm: ").strip() == require_word
    return input(f"{prompt} (y/n): ").strip().lower() in ['y', 'yes']
