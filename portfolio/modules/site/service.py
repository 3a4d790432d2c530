from portfolio.config import settings
from datetime import datetime, timezone
from typing import List, Dict, Any
from xml.sax.saxutils import escape

# path, change frequency, priority
SITE_PAGES = [
    ("", "monthly", 1.0),
    ("/about", "monthly", 0.8),
    ("/projects", "weekly", 0.9),
    ("/skills", "monthly", 0.7),
    ("/gallery", "weekly", 0.6),
    ("/documents", "monthly", 0.5),
    ("/contact", "monthly", 0.8),
]


def sitemap_entries() -> List[Dict[str, Any]]:
    base = settings.site_url.rstrip("/")
    last_modified = datetime.now(timezone.utc).date().isoformat()
    return [
        {"loc": f"{base}{path}", "lastmod": last_modified, "changefreq": freq, "priority": priority}
        for path, freq, priority in SITE_PAGES
    ]


def render_sitemap() -> str:
    urls = "".join(
        "<url>"
        f"<loc>{escape(entry['loc'])}</loc>"
        f"<lastmod>{entry['lastmod']}</lastmod>"
        f"<changefreq>{entry['changefreq']}</changefreq>"
        f"<priority>{entry['priority']:.1f}</priority>"
        "</url>"
        for entry in sitemap_entries()
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        f"{urls}</urlset>"
    )
