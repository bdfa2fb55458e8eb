from platform_banner.image_gen.renderer import (
    RenderOptions,
    RendererProto,
    build_renderer,
    render_svg,
)

__all__ = ["RenderOptions", "RendererProto", "build_renderer", "render_svg"]
