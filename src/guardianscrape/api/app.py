"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI

from guardianscrape.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(title="Guardian Scrape", description="Guardian article text and Markov writer API")
    app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
