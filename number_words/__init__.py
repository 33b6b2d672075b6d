"""
Number Words — render numbers as natural-language words in 16 languages.

Architecture: Clean & parse (Decimal) → Registry lookup → Group / Integer / Decimal renderers
Philosophy:  One rendering skeleton, with each language overriding only its own grammar.
"""

__version__ = "1.0.0"
