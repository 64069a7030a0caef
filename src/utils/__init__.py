"""
Generic utility functions shared across modules.

Includes tolerance-aware float comparison, relative error, special-value
classification and number formatting.
"""
