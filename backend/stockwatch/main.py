"""Process entry point.

Run locally:
    uvicorn stockwatch.main:app --reload --port 8000
or:
    python -m stockwatch.main
"""

from __future__ import annotations

import os

from stockwatch.api import create_app
from stockwatch.config import Settings, configure_logging

settings = Settings.from_env()
configure_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "8000")))
