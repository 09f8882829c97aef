"""
Page rendering for the validation demo.

The template is the only place submitted text reaches a response body, and
Jinja2 autoescaping neutralizes it there no matter which validator ran.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Request

from Security.input_validation import Accepted, ValidationOutcome, human_readable

from .app_context import FORM_TEMPLATE


@dataclass(frozen=True)
class RenderData:
    output: str | None = None
    error: str | None = None

    def __post_init__(self):
        if self.output and self.error:
            raise ValueError("RenderData cannot carry both output and error")


def render_data_from_outcome(outcome: ValidationOutcome) -> RenderData:
    if isinstance(outcome, Accepted):
        return RenderData(output=outcome.text)
    return RenderData(error=human_readable(outcome))


def render_page(request: Request, data: RenderData | None = None):
    data = data or RenderData()
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        FORM_TEMPLATE,
        {"output": data.output, "error": data.error},
    )
