from fastapi import FastAPI, Response

from . import __version__

GREETING = "Hello from Render + Docker!\n"

# plain "text/plain", no charset parameter
greeting = Response(content=GREETING, headers={"Content-Type": "text/plain"})

# docs routes off so every path falls through to the greeting
app = FastAPI(
    title="Greeter",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

# ASGI endpoint, so every method matches
app.add_route("/{path:path}", greeting, name="greet", include_in_schema=False)
