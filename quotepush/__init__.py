"""Package for quotepush source code.

Expose subpackages for easier imports, e.g. `from quotepush import quotes, github`.
"""

from . import github, quotes  # re-export packages

__all__ = ["quotes", "github"]
