"""Literal substring predicates.

None of these use a regex engine, so characters that are special in
pattern syntax are always matched literally.
"""

__docformat__ = 'google'

__all__ = [
    'starts_with',
    'ends_with',
    'contains'
]

def starts_with(prefix: str, subject: str) -> bool:
    """
    Check if a string starts with another string.

    Example:
        >>> starts_with('+', '+233')
        True
        >>> starts_with('.*', 'abc')
        False
    """
    return subject.find(prefix) == 0

def ends_with(suffix: str, subject: str) -> bool:
    """
    Check if a string ends with another string.

    Example:
        >>> ends_with('.txt', 'notes.txt')
        True
        >>> ends_with('notes.txt', '.txt')
        False
    """
    if len(suffix) > len(subject):
        return False

    expected_position = len(subject) - len(suffix)
    return subject.rfind(suffix) == expected_position

def contains(substr: str, subject: str) -> bool:
    return subject.find(substr) != -1
