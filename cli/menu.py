"""Interactive menu for the password tool.

Each menu action calls exactly one core operation and renders its result.
"""

import getpass
import logging
from typing import Optional

from pydantic import ValidationError

from core import (
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_SEPARATOR,
    DEFAULT_WORD_COUNT,
    LOG_DIR,
    RECORDS_FILE,
    CredentialRecord,
    CredentialStore,
    IndexOutOfRange,
    StorageError,
    StrengthReport,
    configure_logging,
    generate_memorable,
    generate_random,
    validate_strength,
)

from cli.prompts import confirm_action, prompt_int, prompt_text, prompt_yes_no


logger = logging.getLogger(__name__)

MENU_OPTIONS = (
    "Generate random password",
    "Generate memorable password",
    "Check password strength",
    "Save password",
    "List saved passwords",
    "Search password",
    "Delete password",
    "Exit",
)
EXIT_CHOICE = str(len(MENU_OPTIONS))


def print_report(report: StrengthReport) -> None:
    """Render a strength report."""
    print(f"\nStrength: {report.strength}")
    print(f"Score: {report.score}/6")
    if report.feedback:
        print("Suggestions:")
        for tip in report.feedback:
            print(f"  - {tip}")


def format_record(index: Optional[int], record: CredentialRecord, show_created: bool = True) -> str:
    line = f"{record.service} - {record.username}"
    if index is not None:
        line = f"{index}. {line}"
    if show_created:
        line += f" (Created: {record.created_at})"
        if record.age_warning():
            line += " [!]"
    return line


def generate_random_flow() -> str:
    length = prompt_int("Length", DEFAULT_PASSWORD_LENGTH)
    upper = prompt_yes_no("Use uppercase?", default=True)
    digits = prompt_yes_no("Use digits?", default=True)
    special = prompt_yes_no("Use special characters?", default=True)

    password = generate_random(length, upper, digits, special)
    print(f"\nGenerated password: {password}")
    return password


def generate_memorable_flow() -> str:
    words = prompt_int("Number of words", DEFAULT_WORD_COUNT)
    separator = prompt_text(
        f"Separator (default '{DEFAULT_SEPARATOR}')", DEFAULT_SEPARATOR, strip=False
    )
    capitalize = prompt_yes_no("Capitalize words?", default=True)

    password = generate_memorable(words, separator, capitalize)
    print(f"\nGenerated password: {password}")
    return password


def check_strength_flow() -> StrengthReport:
    password = getpass.getpass("Enter password to check: ")
    report = validate_strength(password)
    print_report(report)
    return report


def save_password_flow(store: CredentialStore) -> bool:
    """Prompt for a credential and save its hash."""
    service = prompt_text("Service name")
    if not service:
        print("No service name provided. Password not saved.")
        return False

    username = prompt_text("Username")
    password = getpass.getpass("Password: ")

    report = validate_strength(password)
    if report.strength == "Weak":
        print_report(report)
        if not confirm_action("Warning: This password is weak. Save anyway?"):
            print("Save canceled due to weak password.")
            return False

    try:
        store.append(service, username, password)
    except ValidationError as e:
        print(f"Invalid entry: {e.errors()[0]['msg']}")
        return False
    except StorageError as e:
        print(f"Failed to save password: {e}")
        return False

    print("Password saved (hashed)")
    return True


def list_passwords_flow(store: CredentialStore) -> None:
    records = store.list()
    if not records:
        print("No saved passwords")
        return

    for i, record in enumerate(records):
        print(format_record(i, record))


def search_passwords_flow(store: CredentialStore) -> None:
    query = prompt_text("Search service")
    results = store.search(query)
    if not results:
        print("No passwords found")
        return

    for record in results:
        print(format_record(None, record, show_created=False))


def delete_password_flow(store: CredentialStore) -> bool:
    """List records and delete the one the user picks."""
    records = store.list()
    if not records:
        print("No saved passwords")
        return False

    for i, record in enumerate(records):
        print(format_record(i, record, show_created=False))

    index = prompt_int("Enter index to delete", 0, minimum=None)
    if not confirm_action(f"Delete entry {index}?", require_word="DELETE"):
        print("Deletion canceled.")
        return False

    try:
        removed = store.delete_at(index)
    except IndexOutOfRange:
        print(f"No password at index {index}.")
        return False
    except StorageError as e:
        print(f"Failed to delete password: {e}")
        return False

    print(f"Password for '{removed.service}' deleted")
    return True


def main_menu(store: CredentialStore) -> None:
    actions = {
        "1": generate_random_flow,
        "2": generate_memorable_flow,
        "3": check_strength_flow,
        "4": lambda: save_password_flow(store),
        "5": lambda: list_passwords_flow(store),
        "6": lambda: search_passwords_flow(store),
        "7": lambda: delete_password_flow(store),
    }

    while True:
        print("\n=== Password Manager ===")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            print(f"{number}. {label}")

        choice = input("\nEnter choice: ").strip()
        if choice == EXIT_CHOICE:
            print("Goodbye.")
            break

        action = actions.get(choice)
        if action is None:
            print("Invalid choice")
            continue
        action()


def main(records_file: str = RECORDS_FILE, log_dir: str = LOG_DIR) -> int:
    """Console entry point."""
    configure_logging(log_dir)
    store = CredentialStore(records_file)
    logger.info("Opened %s with %d record(s)", store.records_file, len(store))

    try:
        main_menu(store)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
