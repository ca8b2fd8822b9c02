"""calcapp: a calculator and greeting service with swappable collaborators."""
