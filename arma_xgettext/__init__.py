"""
arma-xgettext: translatable string extraction for Arma (SQF and config) sources.
"""

__version__ = "0.3.0"
