# enellerett/adapters/api/routers/site.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from enellerett.shared.config import settings

router = APIRouter(tags=["Site"])

FAVICON_SVG = """<svg width="32" height="32" viewBox="0 0 32 32" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="grad" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:#667eea;stop-opacity:1" />
      <stop offset="100%" style="stop-color:#764ba2;stop-opacity:1" />
    </linearGradient>
  </defs>
  <rect width="32" height="32" rx="6" fill="url(#grad)"/>
  <text x="16" y="23" font-family="Arial, sans-serif" font-size="20" font-weight="bold" text-anchor="middle" fill="white">e</text>
</svg>"""


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots_txt() -> str:
    return f"User-agent: *\nAllow: /\nSitemap: {settings.SITE_URL}/sitemap.xml"


@router.get("/sitemap.xml")
def sitemap_xml() -> Response:
    body = f"""<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
    <url>
        <loc>{settings.SITE_URL}/</loc>
        <lastmod>{settings.SITEMAP_LASTMOD}</lastmod>
        <changefreq>weekly</changefreq>
        <priority>1.0</priority>
    </url>
</urlset>"""
    return Response(content=body, media_type="application/xml")


@router.get("/favicon.ico")
def favicon() -> Response:
    return Response(content=FAVICON_SVG, media_type="image/svg+xml")
