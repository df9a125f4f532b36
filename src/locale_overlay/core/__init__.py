"""Engine core: discovery, coverage, merge, dialogue overlay and the runner."""
