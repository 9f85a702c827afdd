"""
git-follow: follow lifetime changes of a pathspec in Git.
"""

__version__ = "1.1.4"
