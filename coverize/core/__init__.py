"""Core cover model.

WHY: The cover builder and the rendered-cover handle are the contract between
the CLI / HTTP layers and the renderers.

HOW: cover.py defines the fluent Cover builder, the RenderedCover
snapshot it produces, and the pure font-size helper.

RULES:
- Renderers only ever see RenderedCover, never the mutable builder
- Typesetting is delegated to cover_typeset.typeset()
"""
