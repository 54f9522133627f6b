"""Family tree scanning and shim emission."""

from .models import SCRIPT_EXTENSIONS, ScanSummary, ScriptFile, ShimRecord

__all__ = ["SCRIPT_EXTENSIONS", "ScanSummary", "ScriptFile", "ShimRecord"]
