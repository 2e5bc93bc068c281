"""Web adapters for serving the identity probe."""

from ip_detection.adapters.web.probe_app import VERIFY_PATH, create_app
from ip_detection.adapters.web.request_snapshot import snapshot_from_request
from ip_detection.adapters.web.uvicorn_server import UvicornProbeServer

__all__ = ["VERIFY_PATH", "UvicornProbeServer", "create_app", "snapshot_from_request"]
