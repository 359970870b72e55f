"""Attire recommendation web service entry point."""
import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from attire import AttireService
from http_weather_provider import HttpWeatherProvider
from attire_server import create_app

DEFAULT_PORT = 8080


def default_port() -> int:
    port = os.getenv("PORT")
    if not port:
        return DEFAULT_PORT

    try:
        return int(port)
    except ValueError as exc:
        raise SystemExit(f"Invalid PORT: {exc}") from exc


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Weather attire recommendation service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=default_port())
    parser.add_argument("--timeout", type=int, default=10, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config() -> str:
    load_dotenv()
    api_url = os.getenv("WEATHER_API_URL")

    if not api_url:
        raise SystemExit("Missing WEATHER_API_URL in environment")

    logging.info("Configuration loaded: api_url=%s", api_url)
    return api_url


def build_app(api_url: str, timeout: int) -> Flask:
    provider = HttpWeatherProvider(base_url=api_url, timeout=timeout)
    service = AttireService(provider)
    logging.info("Attire service ready (timeout=%ss)", timeout)
    return create_app(service)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    api_url = load_config()

    app = build_app(api_url, args.timeout)
    logging.info("Serving on %s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
