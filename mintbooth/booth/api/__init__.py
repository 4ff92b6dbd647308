"""
Booth REST API
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mintbooth.booth.api import admin, booth, print_request
from mintbooth.booth.api.errors import register_error_handlers
from mintbooth.booth.app import App


def create_app(booth_app: App) -> FastAPI:
    """
    Creates the FastAPI app for the booth.

    Endpoints are synchronous, i.e., FastAPI runs them on its worker thread pool.
    """
    app = FastAPI(title="mintbooth")
    app.state.booth_app = booth_app

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[booth_app.config.server.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(print_request.router)
    app.include_router(admin.router)
    app.include_router(booth.router)
    return app
