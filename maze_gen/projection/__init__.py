from .spatial import ProjectionConfig, cell_to_world, project_grid

__all__ = ["ProjectionConfig", "cell_to_world", "project_grid"]
