from fastapi import Request
from fastapi.responses import HTMLResponse

from .rendering import render_page


def register_page_routes(app):
    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        return render_page(request)

    @app.get("/hello", response_class=HTMLResponse)
    async def hello(request: Request):
        # Deliberately unescaped: the demo's reflected-XSS counterexample.
        names = request.query_params.getlist("name")
        name = names[0] if names else ""
        return HTMLResponse(f"Hello, {name}!")
