"""Run the Dreamteller API locally under uvicorn.

Reload is enabled when ``APP_ENV=development``. Dependencies must already be
installed (``pip install -e .``).
"""

from __future__ import annotations

import uvicorn

from dreamteller.core.config import get_settings
from dreamteller.llm.main import app


def main() -> None:
    settings = get_settings()
    reload_enabled = settings.app_env == "development"
    if reload_enabled:
        uvicorn.run(
            "dreamteller.llm.main:app",
            host=settings.server_host,
            port=settings.server_port,
            reload=True,
        )
    else:
        uvicorn.run(
            app,
            host=settings.server_host,
            port=settings.server_port,
            reload=False,
        )


if __name__ == "__main__":
    main()
