"""Infrastructure layer: filesystem writes, workspace emission, external tools."""
