"""API docs: the packaged OpenAPI document and a Swagger UI page for it.

``openapi.yaml`` ships inside the ``gemini_gateway`` package, so both
routes work from a wheel install as well as from a checkout.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

from flask import Blueprint, Response, current_app, url_for

docs_bp = Blueprint("docs", __name__)

SPEC_RESOURCE = "openapi.yaml"


@lru_cache(maxsize=1)
def load_openapi_spec() -> bytes:
    return resources.files("gemini_gateway").joinpath(SPEC_RESOURCE).read_bytes()


def _swagger_page(spec_url: str, model: str) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Gemini Gateway ({model})</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
  </head>
  <body>
    <div id="swagger-ui"></div>
    <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
    <script>
      window.onload = () => {{
        window.ui = SwaggerUIBundle({{ url: "{spec_url}", dom_id: "#swagger-ui", docExpansion: "list" }});
      }};
    </script>
  </body>
</html>"""


@docs_bp.get("/openapi.yaml")
def openapi_yaml() -> Response:
    return Response(load_openapi_spec(), mimetype="application/yaml")


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    page = _swagger_page(url_for("docs.openapi_yaml"), current_app.config["LLM_MODEL"])
    return Response(page, mimetype="text/html")
