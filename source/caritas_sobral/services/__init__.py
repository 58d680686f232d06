"""This module initializes the services package.

It re-exports the services used by the web layer and the CLI, so callers
do not depend on the internal module layout.
"""

from caritas_sobral.services.auth import AuthService
from caritas_sobral.services.editais import EditaisService
from caritas_sobral.services.noticias import NoticiasService
from caritas_sobral.services.patrimonio import PatrimonioService
from caritas_sobral.services.uploads import UploadService

__all__ = [
    "AuthService",
    "EditaisService",
    "NoticiasService",
    "PatrimonioService",
    "UploadService",
]
