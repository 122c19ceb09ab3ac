from blogdesk.web.routers.articles import router as articles_router
from blogdesk.web.routers.auth import router as auth_router
from blogdesk.web.routers.upload import router as upload_router

__all__ = [
    "articles_router",
    "auth_router",
    "upload_router",
]
