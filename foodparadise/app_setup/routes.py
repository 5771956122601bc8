"""
Routes simples (hors routers): page racine et favicon.
"""
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from starlette.status import HTTP_204_NO_CONTENT

def register_routes(app: FastAPI) -> None:
    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    def root():
        return "Working Service"

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=HTTP_204_NO_CONTENT)
