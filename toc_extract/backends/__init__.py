"""PDF text extraction backends, looked up by name from the CLI and API."""

from toc_extract.backends.base import TextExtractionBackend, TextExtractionError
from toc_extract.backends.pymupdf_backend import PyMuPDFBackend

__all__ = ["TextExtractionBackend", "TextExtractionError", "PyMuPDFBackend", "REGISTRY", "get_backend"]

REGISTRY: dict[str, type[TextExtractionBackend]] = {
    "pymupdf": PyMuPDFBackend,
}


def get_backend(name: str) -> type[TextExtractionBackend]:
    """
    Look up a backend class by its CLI name (``--backend``).

    Raises KeyError naming the registered backends when ``name`` is not one of them.
    """
    try:
        return REGISTRY[name]
    except KeyError:
        choices = ", ".join(sorted(REGISTRY))
        raise KeyError(f"No text extraction backend named {name!r} (choose from: {choices})") from None
