"""Demonstrates verdict predicates, combinators and call-site capture.

Run it directly::

    python examples/verdict_example_assertions.py

The checks below are written without operand names. When the file is loaded
through ``verdict.load_module`` the calls are rewritten so the failures show
the source text of every non-literal operand and the line they came from.
"""

import verdict
from verdict import and_, any_of, equal, greater_or_equal, not_any_of, or_


def simple_chatbot(prompt: str) -> str:
    """Simple chatbot that greets users."""
    return f"Hello, {prompt}! How can I help you today?"


def check_greeting():
    response = simple_chatbot("Alice")
    return equal(response, "Goodbye, Alice!")


def check_word_count():
    words = simple_chatbot("Bob").split()
    return and_(greater_or_equal(len(words), 3), any_of("Bob!", words), "greeting shape")


def check_no_banned_words():
    banned = {"Goodbye", "Sorry"}
    first_word = simple_chatbot("Charlie").split(",")[0]
    return not_any_of(first_word, banned)


def check_either_language():
    response = simple_chatbot("Dana")
    return or_(any_of("Bonjour", response), any_of("Hola", response), "no supported greeting")


def main() -> None:
    captured = verdict.load_module(__file__, "verdict_example_captured")
    for check in (
        captured.check_greeting,
        captured.check_word_count,
        captured.check_no_banned_words,
        captured.check_either_language,
    ):
        outcome = check()
        print(f"{check.__name__}: {'passed' if outcome else 'failed'}")
        if outcome.failed:
            print(outcome.message)
        print()


if __name__ == "__main__":
    main()
