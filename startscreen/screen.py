"""The start screen: hooks it into the host and rebuilds it on demand."""

import logging
from typing import TYPE_CHECKING

from .renderer import SectionRenderer, Surface

if TYPE_CHECKING:
    from .config import StartScreenConfig
    from .host import Host

logger = logging.getLogger(__name__)

SURFACE_NAME = "*start*"


class StartScreen:
    """Renders the configured sections onto a surface owned by this screen.

    Every render is a full rebuild from the configuration; nothing is patched
    incrementally.
    """

    def __init__(self, host: 'Host', config: 'StartScreenConfig'):
        self.host = host
        self.config = config
        self.surface = Surface(SURFACE_NAME, styles=config.styles)
        self.renderer = SectionRenderer(
            measure_width=host.measure_width,
            lookup_binding=host.lookup_binding,
            render_image=host.render_image,
        )

    def initialize(self) -> None:
        """Re-render on resize and serve as the host's initial surface.

        Each call registers the resize hook again.
        """
        self.host.resize_hooks.append(self._on_resize)
        self.host.initial_surface_function = self.render

    def open(self) -> None:
        """Replace whatever the host shows with a fresh start screen."""
        self.host.show(self.render())

    def render(self) -> Surface:
        """Rebuild the surface for the current viewport width.

        Layout finishes before anything is written, so a failure leaves the
        previous content in place.
        """
        width = self.host.current_viewport_width()
        output = self.renderer.render(self.config, width)
        self.surface.replace(output, styles=self.config.styles)
        logger.debug(f"Rendered {len(output)} segments at width {width}")
        return self.surface

    def _on_resize(self) -> None:
        if self.host.surface is self.surface:
            self.render()
