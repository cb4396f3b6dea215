"""Bannerize - Render text as large ASCII block letters.

Bannerize reads a plain-text banner font (95 printable ASCII glyphs, each a
fixed number of rows tall) and composes input text into block-letter art.

Example:
    $ bannerize "Hello" --banner standard

This prints "Hello" using the glyphs from banners/standard.txt.
"""

import logging

# Silent until the application configures logging
logging.getLogger("bannerize").addHandler(logging.NullHandler())

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
