"""HTTP adapter (FastAPI) over the posts pipeline."""

from postrail.api.app import create_app

__all__ = ["create_app"]
