"""View-state containers driven by front-ends (CLI, GUI, web)."""
