"""mdnav - link following and path resolution for Markdown notebooks."""

__version__ = "0.1.0"
