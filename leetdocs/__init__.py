"""
leetdocs: turn solved LeetCode problems into static markdown documentation.
"""

__version__ = "0.1.0"
