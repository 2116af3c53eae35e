"""
Catalog Search - palindrome discount product search service

Author: TM3
"""
__version__ = "1.0.0"
