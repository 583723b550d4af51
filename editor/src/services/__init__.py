"""Services for the Perspective Shadow Editor

- scene_renderer: Config -> ordered drawing primitives
- headless_renderer: offscreen PNG output
"""
