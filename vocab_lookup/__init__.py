"""
Vocabulary lookup - dictionary scraping and caching for vocabulary readers
"""

__version__ = "1.0.0"
__description__ = "Oxford Learner's Dictionaries lookup with a shared headless browser"

# Export main factory function for easy access
from .core.factory import create_dictionary_service

__all__ = ["create_dictionary_service"]
