"""
Codegen request and result models.

A request names an output kind and the node it was issued for; the
generator answers with a list of results the host displays as code.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import RESULT_TITLE, ResultLanguage
from chuk_mcp_tokens.models.scene import SceneNode


class GenerationRequest(BaseModel):
    """
    One codegen invocation.

    ``kind`` stays a plain string so an unknown kind reaches the
    generator and fails there instead of in validation.
    """

    kind: str = Field(..., description="Output kind (variables, cssvariables, css, default)")
    node: SceneNode | None = Field(None, description="Node the request was issued for")

    model_config = {"frozen": True}


class CodegenResult(BaseModel):
    """A block of generated code."""

    language: ResultLanguage
    code: str
    title: str = RESULT_TITLE

    model_config = {"frozen": True}
