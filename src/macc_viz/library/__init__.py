"""
Main components for the macc-viz library.

Nothing is exported from this module, users should import from specific submodules:
- macc_viz.library.render (render pipeline, scene graph, SVG output)
- macc_viz.library.interaction (tooltip, click-to-filter, host bridge)
- macc_viz.library.host (host message parsing and redraw adapter)
- macc_viz.library.config (style options)
"""

from __future__ import annotations
