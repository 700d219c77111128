"""Configuration constants and paths for ebolg."""

import os
from pathlib import Path

# Prebuilt stylesheet copied into the output tree when no --stylesheet is given.
# Override via EBOLG_STYLESHEET environment variable.
_default_stylesheet = os.getenv("EBOLG_STYLESHEET")
DEFAULT_STYLESHEET = Path(_default_stylesheet) if _default_stylesheet else None

# Pages always reference the stylesheet at this location inside the output root
STYLESHEET_RELPATH = "style/tailwind.css"

ENCODING = "utf-8"

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
INDEX_NAME = "index.html"

MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists"]

# Utility classes stamped onto rendered Markdown elements
TAILWIND_CLASSES = {
    "h1": "text-3xl font-bold",
    "h2": "text-2xl font-bold mb-2",
    "p": "text-gray-400 mb-4",
    "pre": "bg-gray-700 text-green-300 p-4 rounded mb-4 overflow-x-auto",
    "code": "inline-block",
}

NAV_BUTTON_CLASSES = "bg-green-500 hover:bg-green-600 text-white font-bold py-2 px-4 rounded"

UNSAFE_URL_SCHEMES = ("javascript:", "data:", "vbscript:")

# Title of the optional index page
SITE_TITLE = os.getenv("EBOLG_SITE_TITLE", "Blog")
