"""
HTTP transport for analysis results.

Serves the JSON wire format at ``GET /json`` for the browser view.
"""

import logging
from typing import Mapping

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from cogcomplexity.core.output import FileOutput, encode_program_output

logger = logging.getLogger(__name__)


def create_app(files: Mapping[str, FileOutput]) -> Starlette:
    payload = encode_program_output(files, indent=None)

    async def program_json(request: Request) -> Response:
        logger.debug("Serving analysis of %d files", len(files))
        return Response(payload, media_type="application/json")

    return Starlette(routes=[Route("/json", program_json, methods=["GET"])])


def run_server(files: Mapping[str, FileOutput], host: str, port: int) -> None:
    app = create_app(files)
    logger.info("Serving Cognitive Complexity results on http://%s:%d/json", host, port)
    uvicorn.run(app, host=host, port=port, log_level="warning")
