"""
Entrypoint do servidor.
Rodar local: python -m tombamento_api ou uvicorn tombamento_api.app:app --port 3000
"""
import uvicorn

from tombamento_api.core.config import get_settings
from tombamento_api.core.logging import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    # uvicorn converte SIGINT/SIGTERM no shutdown do lifespan, que salva o store
    uvicorn.run(
        "tombamento_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
