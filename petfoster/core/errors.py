from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

_LOG = logging.getLogger("petfoster.query")


class QueryError(Exception):
    """Client supplied a list query that cannot be served.

    Always maps to a 400 response carrying both the code and the message.
    """

    def __init__(self, error_code: str, error_message: str):
        super().__init__(error_message)
        self.error_code = error_code
        self.error_message = error_message

    def as_dict(self) -> dict[str, str]:
        return {"error_code": self.error_code, "error_message": self.error_message}


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(QueryError)
    async def _query_error_handler(request: Request, exc: QueryError):
        _LOG.info(
            "query rejected path=%s error_code=%s error_message=%s request_id=%s",
            request.url.path,
            exc.error_code,
            exc.error_message,
            getattr(request.state, "request_id", None),
        )
        return JSONResponse(status_code=400, content=exc.as_dict())
