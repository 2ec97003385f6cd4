"""Sphinx configuration for the Contact Management API reference."""

import os
import sys

sys.path.insert(0, os.path.abspath(".."))

# Keep autodoc imports away from any real database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

project = "Contact Management API"
copyright = "Contacts"
author = "Contacts Team"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
]

autodoc_member_order = "bysource"
autodoc_default_options = {"members": True, "undoc-members": False}
napoleon_google_docstring = True

templates_path = []
exclude_patterns: list[str] = ["_build"]

html_theme = "alabaster"
