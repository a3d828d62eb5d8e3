"""Build, tag and push docker images from the state of a git repository."""
