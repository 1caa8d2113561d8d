"""
Models Package

Exports all models for easy importing.
"""

from portfolio_hub.models.post import Post

__all__ = ['Post']
