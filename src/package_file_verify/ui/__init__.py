"""Rich rendering of verification results."""

from .dashboard import build_result_table, render_result

__all__ = ["build_result_table", "render_result"]
