"""Write the Recifind OpenAPI document to docs/openapi.json."""

from pathlib import Path

import orjson

from recifind.factory import create_app


app = create_app()

output = Path("docs/openapi.json")
output.parent.mkdir(parents=True, exist_ok=True)
output.write_bytes(orjson.dumps(app.openapi(), option=orjson.OPT_INDENT_2))
