"""HTTP transport — FastAPI routes over SequenceService.

The api layer may import from services and domain. Services never import it.
"""

from emailseq.api.app import create_app

__all__ = ["create_app"]
