"""Template name safety validation.

Explicit template overrides come from stored content metadata, so they
are checked before being offered to a renderer. A safe name is a
relative identifier that cannot climb out of the template directory.

Usage::

    from wren.paths import is_safe_template_name

    if is_safe_template_name(override):
        candidates.append(override)
"""


def is_safe_template_name(name: str) -> bool:
    """Check whether *name* is a safe relative template identifier.

    A name is considered safe if:

    - It is a non-empty string
    - It does **not** start with ``/`` or ``\\`` (absolute path)
    - It has no drive letter (``C:``)
    - It has no ``..`` path segment (traversal)
    - It does **not** contain ``./`` (relative-current segments)

    Examples::

        >>> is_safe_template_name("templates/full-width.twig")
        True
        >>> is_safe_template_name("../secrets.twig")
        False
        >>> is_safe_template_name("/etc/passwd")
        False
        >>> is_safe_template_name("C:evil.twig")
        False
        >>> is_safe_template_name("")
        False
    """
    if not name or not isinstance(name, str):
        return False
    if name.startswith(("/", "\\")):
        return False
    if len(name) > 1 and name[1] == ":":
        return False
    if "./" in name or ".\\" in name:
        return False
    segments = name.replace("\\", "/").split("/")
    return ".." not in segments
