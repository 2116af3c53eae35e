"""
Palindrome Service

Decides whether a search query is a palindrome. Palindrome queries unlock
the 50% discount on every matched product.
"""
from typing import Optional

from catalog_search.utils.text import normalize_text

# Shorter normalized strings ("a", "aa") never count as palindromes
MIN_PALINDROME_LENGTH = 3


class PalindromeService:
    """Evaluates palindromes over normalized text"""

    def __init__(self, min_length: int = MIN_PALINDROME_LENGTH):
        self.min_length = min_length

    def normalize_for_palindrome(self, text: Optional[str]) -> str:
        """Lowercase, diacritic-free, alphanumeric-only form used for comparison"""
        return normalize_text(text)

    def is_palindrome(self, text: Optional[str]) -> bool:
        """
        Check if text reads the same reversed after normalization

        Args:
            text: Raw text (may be None)

        Returns:
            True only when the normalized text has at least min_length
            characters and equals its reverse
        """
        normalized = self.normalize_for_palindrome(text)

        if len(normalized) < self.min_length:
            return False

        return normalized == normalized[::-1]
