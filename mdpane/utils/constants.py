APP_ORG = "mdpane"
APP_NAME = "Markdown"

DEFAULT_WINDOW_WIDTH = 960
DEFAULT_WINDOW_HEIGHT = 540

DEFAULT_FONT_FILE = "SmileySans-Oblique.ttf"

MD_SUFFIX = ".md"
MD_FILTER = "Markdown (*.md *.MD)"
UNTITLED_NAME = "untitled.md"

CSS_PREVIEW = """
body { font-family: sans-serif; margin: 12px; line-height: 1.5; }
h1,h2,h3,h4,h5 { margin-top: 1.1em; }
pre { padding: 8px; background: #f4f6f8; }
code { background: #f4f6f8; }
blockquote { border-left: 4px solid #ddd; margin: 1em 0; padding: .25em .75em; color: #555; }
table { border-collapse: collapse; }
th, td { border: 1px solid #ddd; padding: 4px 8px; }
a { color: #0b6bfd; text-decoration: none; }
hr { border: none; border-top: 1px solid #ddd; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""
