"""Command-line entry points.

- sitecheck-validate: structural checks on a static document
- sitecheck-browser: behavioral checks on a served site
"""
