"""
News Reader

API Gateway that forwards feed requests to the news provider, and the
paginated feed client that drives a filtered view of its articles.
"""

__version__ = "1.0.0"
