"""FastAPI application and uvicorn entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from automate_bridge.adapters.web.automate_routes import bridge_router
from automate_bridge.config import CONFIG, __version__


def create_app() -> FastAPI:
    app = FastAPI(
        title="Automate Bridge",
        description="Front-end bridge to a remote browser/desktop automation engine",
        version=__version__,
    )
    # Browser front-ends call this from another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(bridge_router)
    return app


app = create_app()


def main():
    import uvicorn

    uvicorn.run(app, host=CONFIG["host"], port=CONFIG["port"], log_level="info")


if __name__ == "__main__":
    main()
