"""Repository scanning engine.

This module exports collection expansion, single-path inspection and
the concurrent coordinator that ties them together.
"""

from statusctl.scanner.coordinator import ScanCoordinator
from statusctl.scanner.expander import (
    CollectionError,
    build_scan_plan,
    expand_collection,
    standalone_candidate,
)
from statusctl.scanner.inspector import StatusInspector

__all__ = [
    "CollectionError",
    "ScanCoordinator",
    "StatusInspector",
    "build_scan_plan",
    "expand_collection",
    "standalone_candidate",
]
