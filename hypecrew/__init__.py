"""
HypeCrew: a marketplace connecting event hosts with hype performers.
"""

__version__ = "0.1.0"
