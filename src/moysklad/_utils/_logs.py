import logging
from typing import Mapping, Optional

from .constants import HEADER_AUTHORIZATION

logger: logging.Logger = logging.getLogger("moysklad")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)


def masked_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` safe to write to logs."""
    return {
        key: "***" if key.lower() == HEADER_AUTHORIZATION.lower() else value
        for key, value in headers.items()
    }
