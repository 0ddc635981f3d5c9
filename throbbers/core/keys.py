import re

# Characters the realtime database refuses in a path segment.
_UNSAFE_KEY_CHARS = re.compile(r"[.#$/\[\]]")


def safe_key(name: str) -> str:
    """
    Sanitize a display name into a storage-key-safe form.

    Every '.', '#', '$', '/', '[' or ']' becomes '_'. The result never contains
    those characters, so applying it twice changes nothing:
      safe_key("AC/DC") -> "AC_DC"
    """
    return _UNSAFE_KEY_CHARS.sub("_", name)
