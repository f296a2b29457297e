"""Template context and tree materialization."""
