"""
Short code generation for URL shortener.
"""

import random
import string

# 62 characters: a-z, A-Z, 0-9
SHORT_CODE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


class RandomShortCodeGenerator:
    """
    Generates random alphanumeric short codes.

    No uniqueness check is made against the store, so two mappings can
    end up with the same code. With 62^6 possible 6-character codes a
    collision is unlikely at small volumes, but not impossible.
    """

    def __init__(self, length: int = 6):
        self.length = length
        self.characters = SHORT_CODE_ALPHABET

    def generate(self) -> str:
        """Generate a random string of the configured length"""
        return ''.join(random.choice(self.characters) for _ in range(self.length))
