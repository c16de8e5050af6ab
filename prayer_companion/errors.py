"""
Error types for prayer generation.
- LlmError variants are raised by the Gemini client; the orchestrator catches them and falls back.
- ExhaustionError is the only generation error that reaches the HTTP layer.
"""


class LlmError(Exception):
    """Base for every failure of the LLM collaborator."""

    kind = "other"


class LlmRateLimited(LlmError):
    kind = "rate_limited"


class LlmAuthFailed(LlmError):
    kind = "auth_failed"


class LlmTimeout(LlmError):
    kind = "timeout"


class LlmOther(LlmError):
    """Network errors, server errors, empty or malformed responses."""

    kind = "other"


class GenerationFailure(Exception):
    """Primary (LLM) generation failed; carries the LLM error that caused it."""

    def __init__(self, cause: LlmError):
        super().__init__(f"Primary generation failed ({cause.kind}): {cause}")
        self.cause = cause


class ExhaustionError(Exception):
    """Primary, template and static generation all failed. Should be unreachable."""
