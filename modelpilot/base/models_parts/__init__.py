"""One-record-per-file request models; import from ``modelpilot.base.models``."""
