"""Default priority pipeline."""

from importlib import resources
from pathlib import Path

from workmanager.core.pipeline import Pipeline


def create_default_pipeline() -> Pipeline:
    """
    Create the default assignment pipeline.

    Loads the pass order from ``default_pipeline.yml``:

        reset → doctors → hunters → skill → passion → leftover →
        fallback → idle → mental break

    Returns
    -------
    Pipeline
        A fresh pipeline; callers may edit it with insert_after(),
        remove() or replace() without affecting other runs.
    """
    import workmanager.events  # noqa: F401 - register built-in passes

    traversable = resources.files("workmanager") / "default_pipeline.yml"
    with resources.as_file(traversable) as yaml_fs_path:
        return Pipeline.from_yaml(Path(yaml_fs_path))
