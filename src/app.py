"""
FastAPI application factory.
"""
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .auth.presentation.api import router as auth_router
from .gerbang.presentation.api import router as gerbang_router
from .lalin.presentation.api import routers as lalin_routers


def create_app(services, cors_origins: Optional[List[str]] = None) -> FastAPI:
    app = FastAPI(title="Lalin Dashboard API")
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(gerbang_router)
    for router in lalin_routers:
        app.include_router(router)

    @app.get("/")
    def index():
        return {"message": "Lalin Dashboard API", "docs": "/docs"}

    return app
