from __future__ import annotations

from precis_ai.data_models import SummaryResult


def result_to_markdown(result: SummaryResult) -> str:
    """Render a result as the markdown block used for copying."""
    points = "\n".join(f"- {point}" for point in result.key_points)
    return f"## Summary\n\n{result.summary}\n\n## Key Points\n\n{points}"


def share_text(result: SummaryResult) -> str:
    return f"Summary:\n{result.summary}"


def share_title(file_name: str) -> str:
    return f"Summary of {file_name}"
