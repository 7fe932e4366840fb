"""UsageMetrics value object: token usage reported for one model response."""

from pydantic import BaseModel


def _add(left: int | None, right: int | None) -> int | None:
    if left is None and right is None:
        return None
    return (left or 0) + (right or 0)


class UsageMetrics(BaseModel, frozen=True):
    """Token counts for a model response. A count is None when the provider omits it."""

    total_tokens: int | None = None
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    cached_tokens: int | None = None
    tool_use_prompt_tokens: int | None = None

    def plus(self, other: "UsageMetrics") -> "UsageMetrics":
        """Return the field-wise sum of self and other."""
        return UsageMetrics(
            total_tokens=_add(self.total_tokens, other.total_tokens),
            prompt_tokens=_add(self.prompt_tokens, other.prompt_tokens),
            completion_tokens=_add(self.completion_tokens, other.completion_tokens),
            cached_tokens=_add(self.cached_tokens, other.cached_tokens),
            tool_use_prompt_tokens=_add(
                self.tool_use_prompt_tokens, other.tool_use_prompt_tokens
            ),
        )

    def describe(self) -> str:
        """One-line summary for the terminal, listing only the reported counts."""
        parts = [
            f"{label}={value}"
            for label, value in (
                ("total", self.total_tokens),
                ("prompt", self.prompt_tokens),
                ("completion", self.completion_tokens),
                ("cached", self.cached_tokens),
                ("tool_use_prompt", self.tool_use_prompt_tokens),
            )
            if value is not None
        ]
        return "tokens: " + (", ".join(parts) if parts else "not reported")
