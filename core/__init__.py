"""Format-agnostic conversion engine: canonical models, parsing, detection and orchestration."""
