from fastapi import APIRouter
from fastapi.responses import Response
from portfolio.modules.site.service import render_sitemap

router = APIRouter(tags=["site"])


@router.get("/sitemap.xml")
async def sitemap():
    return Response(content=render_sitemap(), media_type="application/xml")
