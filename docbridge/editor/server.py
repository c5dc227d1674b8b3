"""FastAPI server for the document editor page, save callback and loader bootstrap."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import aiohttp
from fastapi import FastAPI, Header, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from loguru import logger

from docbridge.config import Config, config
from docbridge.editor.callback import EditorCallback, client_timeout, save_document
from docbridge.editor.config_builder import SAVE_PATH, DocumentRequest, build_editor_config
from docbridge.editor.token import verify_token
from docbridge.errors import DocumentTransferError, EncodingError, InvalidTokenError
from docbridge.frontend import render_init_script

# Template directory
TEMPLATE_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

NOT_CONFIGURED_MESSAGE = "OnlyOffice is not fully configured !"


def create_app(settings: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings : Optional[Config]
        Application configuration. Defaults to the global config.

    Returns
    -------
    FastAPI
        The configured FastAPI application.
    """
    settings = settings or config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        app.state.http_session = aiohttp.ClientSession(
            timeout=client_timeout(settings.callback_timeouts)
        )
        logger.info(f"docbridge server started, public address {settings.full_domain}")
        try:
            yield
        finally:
            await app.state.http_session.close()
            logger.info("docbridge server stopped")

    app = FastAPI(
        title="docbridge",
        description="Document editor page, save callback and web loader bootstrap",
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/onlyoffice", response_class=HTMLResponse)
    async def onlyoffice_page(
        request: Request,
        file: str = Query(..., description="File server URL of the document"),
        token: str = Query("", description="File server access token"),
        user: str = Query("", description="Editing user"),
        mtime: str = Query("", description="Document modification time"),
    ):
        """Open the document editor on a document.

        Raises
        ------
        HTTPException
            If the document path cannot be encoded.
        """
        editor = settings.editor
        if not editor.is_configured:
            return HTMLResponse(NOT_CONFIGURED_MESSAGE)

        try:
            editor_config = build_editor_config(
                DocumentRequest(file=file, token=token, user=user, mtime=mtime),
                settings,
            )
        except EncodingError as e:
            raise HTTPException(status_code=400, detail=str(e))

        logger.debug(
            f"Opening {editor_config['document']['title']} in "
            f"{editor_config['editorConfig']['mode']} mode for {user or 'anonymous'}"
        )
        return templates.TemplateResponse(
            request,
            "onlyoffice.html",
            {
                "title": editor.title,
                "server": editor.server,
                "editor_config": editor_config,
            },
        )

    @app.post(SAVE_PATH)
    async def onlyoffice_callback(
        request: Request,
        payload: EditorCallback,
        file: str = Query(..., description="File server URL of the document"),
        token: str = Query("", description="File server access token"),
        authorization: Optional[str] = Header(None),
    ):
        """Save callback called by the editor server.

        Raises
        ------
        HTTPException
            If the callback token is invalid or the document could not be stored.
        """
        secret = settings.editor.jwt_secret
        callback_token = payload.token or authorization
        if secret and callback_token:
            try:
                verify_token(callback_token, secret)
            except InvalidTokenError:
                raise HTTPException(status_code=403, detail="Invalid callback token")

        try:
            await save_document(payload, file, token, request.app.state.http_session)
        except DocumentTransferError as e:
            logger.error(f"Save of {payload.key} failed: {e} ({e.reason})")
            raise HTTPException(status_code=500, detail=str(e))
        except EncodingError as e:
            raise HTTPException(status_code=400, detail=str(e))

        return JSONResponse({"error": 0})

    @app.get("/init.js")
    async def init_script():
        """Bootstrap script of the UI framework web loader."""
        loader = settings.loader
        return Response(
            render_init_script(loader.service_worker_version, loader.pdfjs_version),
            media_type="application/javascript",
        )

    return app


async def run_server(settings: Optional[Config] = None):
    """Run the docbridge server."""
    import uvicorn

    settings = settings or config
    app = create_app(settings)
    server_config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=settings.HTTP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    server = uvicorn.Server(server_config)
    await server.serve()
