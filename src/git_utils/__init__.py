"""git-utils - safe branch creation on top of the git CLI."""
