"""
Survey Translation Checks

Validates translated JSON survey definitions.

A survey document is an arbitrary JSON tree. Some of its objects are
translation maps: objects keyed by locale codes (``default``, ``en``,
``es-CO`` ...) whose values are the translated text. This package finds
those maps anywhere in the tree and reports:
    - maps that were translated for some locales but miss the target locale
    - translated values containing HTML-like markup
    - maps whose English/default fallback text is empty

ARCHITECTURAL GUARANTEE:
------------------------
The validator never mutates the document it inspects.
Mutation (normalization) is a separate, explicit pass.
"""

__version__ = "0.1.0"
