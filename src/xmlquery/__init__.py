import logging
from importlib.metadata import version

__version__ = version("xmlquery")

logger = logging.getLogger(__name__)

from xmlquery.errors import DocumentNotFoundError, ParseError, XmlQueryError  # noqa: E402
from xmlquery.facade import XmlQueryFacade, chunk_values  # noqa: E402

__all__ = [
    "DocumentNotFoundError",
    "ParseError",
    "XmlQueryError",
    "XmlQueryFacade",
    "__version__",
    "chunk_values",
    "logger",
]
