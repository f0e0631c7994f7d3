# File: media_scanner/api/middleware.py

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next) -> Response:
    """
    Adds permissive CORS headers to every response.
    OPTIONS on any path is answered here with an empty 200, whether or not
    the browser sent the usual preflight headers.
    """
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)

    response.headers.update(CORS_HEADERS)
    return response
