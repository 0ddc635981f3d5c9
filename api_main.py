"""Entry: read configuration, then serve the relay with uvicorn."""
import sys

import uvicorn

from throbbers.api.fastapi_app import create_app
from throbbers.config import load_settings
from throbbers.core import ConfigError, configure_logging, log_error, log_success

configure_logging()

try:
    settings = load_settings()
except ConfigError as e:
    log_error(str(e))
    sys.exit(1)

app = create_app(settings)


if __name__ == "__main__":
    log_success(f"Server running on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
