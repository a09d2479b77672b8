"""Run the API with uvicorn: ``python -m contract_api [--host H] [--port P]``."""

import argparse

import uvicorn

from contract_api.app import create_app
from contract_kernel.config import load_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Advertising contract API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--config", default=None, help="YAML settings file")
    args = parser.parse_args()

    settings = load_settings(args.config)
    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
