"""Text output: the hex grid, world profiles and the system listing."""
