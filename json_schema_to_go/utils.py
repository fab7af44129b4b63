"""
Utility functions for JSON Schema to Go generator.

Identifier generation turns arbitrary schema strings (definition keys,
property names, titles, file names) into valid Go identifiers.
"""

import inflection

# Commonly used initialisms kept fully upper-cased in identifiers (golint list)
COMMON_INITIALISMS = frozenset(
    {
        "API",
        "ASCII",
        "CPU",
        "CSS",
        "DNS",
        "EOF",
        "GUID",
        "HTML",
        "HTTP",
        "HTTPS",
        "ID",
        "IP",
        "JSON",
        "LHS",
        "QPS",
        "RAM",
        "RHS",
        "RPC",
        "SLA",
        "SMTP",
        "SQL",
        "SSH",
        "TCP",
        "TLS",
        "TTL",
        "UDP",
        "UI",
        "UID",
        "UUID",
        "URI",
        "URL",
        "UTF8",
        "VM",
        "XML",
        "XSRF",
        "XSS",
    }
)


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_camel_case(word: str) -> list[str]:
    """Split a word where an upper-case letter follows a lower-case letter or digit."""
    words = []
    start = 0
    for pos in range(1, len(word)):
        previous, char = word[pos - 1], word[pos]
        if char.isupper() and (previous.islower() or previous.isnumeric()):
            words.append(word[start:pos])
            start = pos
    words.append(word[start:])
    return words


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return [part for word in _normalize_separators(text).split(" ") for part in _split_camel_case(word)]


def _identifier_part(word: str) -> str:
    """Title-case a word, or upper-case it entirely if it is a known initialism."""
    upper = word.upper()
    if upper in COMMON_INITIALISMS:
        return upper
    return word.capitalize()


def generate_identifier(text: str, exported: bool) -> str:
    """Convert an arbitrary string to a Go identifier.

    Examples:
        ("first_name", True) -> "FirstName"
        ("userId", True) -> "UserID"
        ("http-url", False) -> "httpURL"
        ("--", True) -> ""

    Args:
        text: The source string (definition key, property name, title...)
        exported: Whether the identifier should start with an upper-case letter

    Returns:
        The identifier, or an empty string when nothing usable is left.
        Callers must treat an empty result as an error.
    """
    if not text:
        return ""

    parts = [_identifier_part(word) for word in _split_into_words(text)]
    if not exported:
        parts[0] = parts[0].lower()
    raw_name = "".join(parts)

    # Digits are only valid after the first kept character
    identifier = ""
    for char in raw_name:
        if char.isalpha() or char == "_" or (char.isdigit() and identifier):
            identifier += char
    return identifier


def singularize(plural: str) -> str:
    """Singular form of a container name, used to name its element type.

    Falls back to appending "Item" when the word has no distinct singular
    form ("Address" -> "AddressItem").
    """
    singular = inflection.singularize(plural)
    if singular == plural:
        singular += "Item"
    return singular
