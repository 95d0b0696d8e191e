"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from audio_transcribe.config import AppConfig
from audio_transcribe.dependencies import get_config
from audio_transcribe.routes import health_router, transcribe_router

patch_all()


def create_app(config: AppConfig) -> FastAPI:
    """Builds the app with CORS restricted to the configured origins."""
    app = FastAPI(title="Audio Transcribe Service")

    origins = list(config.server.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials only with an explicit origin list, never with "*".
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(transcribe_router)

    return app


app = create_app(get_config())


def run():
    """Serves the app with uvicorn using the configured host and port."""
    config = get_config()
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
