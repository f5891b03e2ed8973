from __future__ import annotations

import uvicorn

from .index import build_app
from .settings import Settings


def main() -> None:
    settings = Settings.from_env()
    app = build_app(settings)
    # logging is already configured by build_app
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
