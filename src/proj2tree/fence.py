"""Code fence sizing.

A file is wrapped in a run of backticks longer than any run inside it, so nothing
in the file can close its fence early.
"""

BACKTICK = "`"
MIN_FENCE_LENGTH = 3
NESTED_FENCE_LENGTH = 4

# Content that likely embeds fenced blocks or template literals.
_NESTED_MARKERS = ("```", "`${")


def longest_backtick_run(content: str) -> int:
    """Return the length of the longest contiguous run of backticks.

    Example:
        >>> longest_backtick_run("a `b` ``c`` d")
        2
        >>> longest_backtick_run("no ticks")
        0
    """
    longest = 0
    current = 0
    for char in content:
        if char == BACKTICK:
            current += 1
            if current > longest:
                longest = current
        else:
            current = 0
    return longest


def fence_length(content: str) -> int:
    """Compute the shortest safe fence length for ``content``.

    The baseline is 3, raised to 4 when the content contains a triple backtick or
    the ``${`` template marker after a backtick. The result is never shorter than
    the longest backtick run plus one.

    Example:
        >>> fence_length("plain text")
        3
        >>> fence_length("`a` ``` b```")
        4
        >>> fence_length("const s = `${x}`;")
        4
        >>> fence_length("`````")
        6
    """
    baseline = NESTED_FENCE_LENGTH if any(marker in content for marker in _NESTED_MARKERS) else MIN_FENCE_LENGTH
    return max(baseline, longest_backtick_run(content) + 1)


def make_fence(content: str) -> str:
    """Return the backtick fence string for ``content``."""
    return BACKTICK * fence_length(content)
