"""
Blog Pages - build-time page planner for a blogging theme.

This package queries articles and authors from the configured content
sources, merges them into one model, and plans the listing, article and
author pages a static-site host renders.

Main entry points are ``create_pages`` for hosts and the CLI via the
`blog-pages plan` command.

Example:
    $ blog-pages plan -i snapshot.json -o public/pages.json
"""

__all__ = ["__version__", "create_pages", "plan_pages", "slugify", "build_paginated_path"]
__version__ = "0.1.0"

from .core.paths import build_paginated_path, slugify
from .core.planner import plan_pages
from .runner import create_pages
