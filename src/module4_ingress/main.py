# file: src/module4_ingress/main.py
"""
Service entry point.

Usage:
    python -m src.module4_ingress.main --config my_config.yaml --port 8081
"""

import argparse
import logging
import sys

import uvicorn

from src.module0_config import load_config, setup_logging, ConfigError

from .app import create_app


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Hamming(15,11) noisy link hop: encode, disturb, correct, forward"
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file (default: packaged defaults)'
    )
    parser.add_argument('--host', type=str, default=None, help='Listen address (overrides server.host)')
    parser.add_argument('--port', type=int, default=None, help='Listen port (overrides server.port)')
    parser.add_argument('--log-level', type=str, default=None, help='Log level (overrides logging.level)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.get('logging', {}).get('level', 'INFO'))
    logging.info(
        f"Loss probability {config['channel']['message_loss_probability']}%, "
        f"frame error probability {config['channel']['frame_error_probability']}%"
    )

    server = config.get('server', {})
    uvicorn.run(
        create_app(config),
        host=args.host or server.get('host', '0.0.0.0'),
        port=args.port or server.get('port', 8081),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
