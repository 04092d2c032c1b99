"""
readmegen - README generation from package.json and git metadata.

Collects project information from the local ``package.json`` and the git
remote configuration, then renders it into a README.md through a template.
"""

__version__ = "0.1.0"
