import random

# Base36 alphabet, lowercase only
ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
DEFAULT_ALIAS_LENGTH = 5


def generate_alias(length: int = DEFAULT_ALIAS_LENGTH) -> str:
    """Generate a random alias of exactly `length` characters from ALPHABET.

    A fresh generator seeded from OS entropy is built on every call, so no
    state is shared between callers or carried across restarts. Aliases are
    not secrets; non-cryptographic randomness is enough.
    """
    if length <= 0:
        return ""
    rng = random.Random()
    return ''.join(rng.choices(ALPHABET, k=length))
