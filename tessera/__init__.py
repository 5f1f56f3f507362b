"""
tessera: small standalone utility helpers
-----------------------------------------

Subpackages:
  date     : calendar getters, token date formatter, date splitter
  console  : colorized, prefixed console wrapper
  base     : logging setup, filesystem checks, file I/O
  shared   : configuration loading, read_file with exit-on-error
"""

__version__ = "1.0.0"
