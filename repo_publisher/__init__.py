"""
repo-publisher: initialize a local git repository and publish it.
"""

__version__ = "0.1.0"
