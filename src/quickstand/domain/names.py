"""Small text helpers behind the ``hello`` and ``format`` commands."""

from __future__ import annotations


def greet(name: str) -> str:
    """Greeting line for *name*.

    Examples:
        >>> greet("John")
        'Hello, John!'
        >>> greet("")
        'Hello, !'
    """
    return f"Hello, {name}!"


def format_name(name: str) -> str:
    """Capitalize each space-separated word and lowercase the rest.

    Examples:
        >>> format_name("aDA lOVELACE")
        'Ada Lovelace'
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))
