import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the API process or the generator CLI."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # uvicorn installs its own handlers; keep its access log at the same level
    logging.getLogger("uvicorn.access").setLevel(level.upper())
