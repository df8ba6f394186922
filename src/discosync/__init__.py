"""
DiscoSync - discography catalog reconciliation for artist websites.
"""

__version__ = "1.0.0"
