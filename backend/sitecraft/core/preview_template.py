"""
Assembles a generated site into one HTML document for the preview iframe.

The html/css/js are the user's own generated code and go in verbatim; the
document is only ever rendered inside a sandboxed frame.
"""

from sitecraft.schemas.generation import GeneratedSite

# Served with the preview document so it stays isolated even when opened
# directly rather than through the iframe.
PREVIEW_CSP = "sandbox allow-scripts"


def build_preview_document(site: GeneratedSite) -> str:
    script = f"<script>{site.js}</script>" if site.js else ""
    return (
        "<html>"
        f"<head><style>{site.css}</style></head>"
        f"<body>{site.html}{script}</body>"
        "</html>"
    )
