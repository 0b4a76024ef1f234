"""
sigil - tag identifier → animated four-way symmetric LED pattern
"""

__version__ = "0.3.0"
