"""
Code generator - the single codegen entry point.

One request in, a list of code results out. Each request builds its
own emitter and cache; nothing is kept between requests except the
report of the last run.
"""

from __future__ import annotations

import logging

from chuk_mcp_tokens.constants import ErrorMessages, OutputKind
from chuk_mcp_tokens.emitter import CssEmitter, GenerationReport, render_css, render_variable_map
from chuk_mcp_tokens.models.codegen import CodegenResult, GenerationRequest
from chuk_mcp_tokens.models.config import GeneratorConfig
from chuk_mcp_tokens.models.scene import SceneNode
from chuk_mcp_tokens.tokens.errors import UnsupportedRequestError
from chuk_mcp_tokens.tokens.store import TokenStore

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Dispatches codegen requests by output kind.

    Kinds:
    - variables: JSON map of color token ids used by a node
    - cssvariables: the full themed stylesheet
    - css: the node's host CSS with normalized var() references
    - default: the palette theme blocks only (legacy output)
    """

    def __init__(self, store: TokenStore, config: GeneratorConfig):
        """
        Initialize the generator.

        Args:
            store: Host token store
            config: Generation policy
        """
        self.store = store
        self.config = config
        self.last_report = GenerationReport()

    async def generate(self, request: GenerationRequest) -> list[CodegenResult]:
        """
        Generate code for a request.

        Args:
            request: Output kind and node

        Returns:
            Code results for the host to display

        Raises:
            UnsupportedRequestError: If the output kind is unknown
            MalformedValueError: If the token data is corrupt
        """
        try:
            kind = OutputKind(request.kind)
        except ValueError:
            raise UnsupportedRequestError(request.kind) from None

        emitter = CssEmitter(self.store, self.config)
        self.last_report = emitter.report
        logger.debug("Generating %s", kind.value)

        if kind == OutputKind.VARIABLES:
            node = self._require_node(request)
            code = await render_variable_map(node, emitter.cache)
            return [CodegenResult(language="JSON", code=code)]

        if kind == OutputKind.CSS:
            node = self._require_node(request)
            return [CodegenResult(language="CSS", code=render_css(node.css))]

        overrides = request.node.resolved_variable_modes if request.node else {}
        if kind == OutputKind.CSS_VARIABLES:
            code = await emitter.emit_stylesheet(overrides)
        else:
            code = await emitter.emit_palette(overrides)

        if emitter.report.issues:
            logger.info("Generated %s with %d skipped declarations", kind.value, len(emitter.report.errors))
        return [CodegenResult(language="CSS", code=code)]

    def _require_node(self, request: GenerationRequest) -> SceneNode:
        if request.node is None:
            raise ValueError(ErrorMessages.NODE_REQUIRED.format(kind=request.kind))
        return request.node
