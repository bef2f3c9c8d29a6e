from __future__ import annotations

project = "mdhtml"
release = "0.1.0"

extensions = ["myst_parser"]
source_suffix = {".md": "markdown"}
root_doc = "index"

html_theme = "furo"
